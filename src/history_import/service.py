"""Open both history databases and run a full import."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional, Union

from .dedup import remove_duplicates
from .importer import HistoryImporter
from .models import ImportSummary
from .reporting import LogSink, NullLogSink, NullStepReporter, StepReporter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def open_source(path: PathLike) -> sqlite3.Connection:
    """Safari History.dbを読み取り専用で開く"""
    uri = Path(path).resolve().as_uri() + "?mode=ro"
    return sqlite3.connect(uri, uri=True)


def open_target(path: PathLike) -> sqlite3.Connection:
    """Chrome Historyを読み書きで開く（存在しない場合は作成せずにエラー）"""
    uri = Path(path).resolve().as_uri() + "?mode=rw"
    return sqlite3.connect(uri, uri=True)


def import_history(
    source_path: PathLike,
    target_path: PathLike,
    log: Optional[LogSink] = None,
    progress: Optional[StepReporter] = None,
) -> ImportSummary:
    """
    Safari履歴をChrome履歴にインポートし、重複した訪問を削除

    Args:
        source_path: Safari History.dbのパス
        target_path: Chrome Historyのパス
        log: 処理内容の出力先
        progress: 進捗の出力先

    Returns:
        インポート結果の集計

    Raises:
        sqlite3.Error: DBを開けない、またはDB操作でエラーが発生した場合
    """
    log = log or NullLogSink()
    progress = progress or NullStepReporter()

    with closing(open_source(source_path)) as source, closing(open_target(target_path)) as target:
        importer = HistoryImporter(source, target, log=log, progress=progress)
        # 最後の1ステップは重複削除
        progress.start(importer.step_count() + 1)
        try:
            summary = importer.copy()
            summary.duplicates_removed = remove_duplicates(target, log)
            progress.advance(1)
        finally:
            progress.finish()

    logger.debug("Import finished: %s", summary.to_dict())
    return summary
