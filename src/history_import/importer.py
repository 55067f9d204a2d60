"""Safari → Chrome history import engine."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import URLCreationError
from .extractor import iter_url_entities, step_count
from .models import VISIT_TRANSITION, EntityResult, ImportSummary, URLEntity
from .reporting import LogSink, NullLogSink, NullStepReporter, StepReporter
from .timeconv import to_chrome

logger = logging.getLogger(__name__)


class HistoryImporter:
    """
    Safari履歴をChrome履歴DBへコピーするインポーター

    URLエンティティ1件ごとに移行先のトランザクションを1つ使い、
    URL行の検索/作成と訪問行の挿入をまとめてコミットします。
    URL行の作成に失敗したエンティティはロールバックしてスキップし、
    他のエンティティの処理は継続します。
    """

    def __init__(
        self,
        source: sqlite3.Connection,
        target: sqlite3.Connection,
        log: Optional[LogSink] = None,
        progress: Optional[StepReporter] = None,
    ):
        """
        Args:
            source: Safari History.dbへの接続（読み取りのみ）
            target: Chrome Historyへの接続
            log: 処理内容の出力先（Noneで出力なし）
            progress: 進捗の出力先（Noneで表示なし）
        """
        self.source = source
        self.target = target
        self.log = log or NullLogSink()
        self.progress = progress or NullStepReporter()

    @staticmethod
    def insert_sql(table: str, attrs: Dict[str, Any]) -> Tuple[str, List[Any]]:
        """INSERT文とパラメータを組み立てる"""
        columns = ", ".join(attrs)
        placeholders = ", ".join("?" * len(attrs))
        return f"INSERT INTO {table} ({columns}) VALUES ({placeholders})", list(attrs.values())

    def step_count(self) -> int:
        """総ステップ数（URL数 + 訪問数）"""
        return step_count(self.source)

    def copy(self) -> ImportSummary:
        """
        全URLエンティティをインポート

        Returns:
            インポート結果の集計

        Raises:
            sqlite3.Error: DB操作でエラーが発生した場合（実行全体を中断）
        """
        summary = ImportSummary()
        for entity in iter_url_entities(self.source):
            result = self.process_entity(entity)
            if not result.ok:
                self.log.error("failed to find or create URL %s, skipping", entity)
                self.progress.advance(1 + len(entity.visits))
            summary.add(result)
        return summary

    def process_entity(self, entity: URLEntity) -> EntityResult:
        """
        1エンティティをトランザクション内でインポート

        URL行の作成に失敗した場合は例外を送出せず、
        ロールバックしたうえでerrorを設定した結果を返す。

        Args:
            entity: インポートするURLエンティティ

        Returns:
            処理結果
        """
        result = EntityResult(url=entity.url)
        try:
            with self.target:
                result.status, result.url_id = self._find_or_create_url_id(entity)
                self.log.info("URL (%s) %s", result.status, entity)
                self.progress.advance(1)

                for visit in entity.visits:
                    self._insert(
                        "visits",
                        {
                            "url": result.url_id,
                            "visit_time": to_chrome(visit.visit_time),
                            "from_visit": 0,
                            "transition": VISIT_TRANSITION,
                            "segment_id": 0,
                            "visit_duration": 0,
                        },
                    )
                    self.log.info("visit %s", visit.visit_time.isoformat())
                    self.progress.advance(1)
                    result.visits_inserted += 1
        except URLCreationError as exc:
            logger.debug("Rolled back %s: %s", entity, exc)
            result.error = exc
        return result

    def _find_or_create_url_id(self, entity: URLEntity) -> Tuple[str, int]:
        row = self.target.execute("SELECT id FROM urls WHERE url = ?", (entity.url,)).fetchone()
        if row:
            return "existing", row[0]

        if not entity.visits:
            raise URLCreationError(entity.url, "no visits")
        last_visit = entity.visits[-1]

        url_id = self._insert(
            "urls",
            {
                "url": entity.url,
                "title": last_visit.title,
                "visit_count": entity.visit_count,
                "typed_count": 0,
                "last_visit_time": to_chrome(last_visit.visit_time),
                "hidden": 0,
                "favicon_id": 0,
            },
        )
        if not url_id or url_id <= 0:
            raise URLCreationError(entity.url, f"invalid last ID: {url_id!r}")
        return "new", url_id

    def _insert(self, table: str, attrs: Dict[str, Any]) -> Optional[int]:
        """1行挿入し、生成されたIDを返す"""
        cursor = self.target.execute(*self.insert_sql(table, attrs))
        return cursor.lastrowid
