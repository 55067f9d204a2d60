#!/usr/bin/env python3
"""
Safari履歴インポートCLI

Usage:
    python -m src.history_import safari.db chrome.db [--verbose] [--progress] [--config PATH]
"""

from __future__ import annotations

import argparse
import sqlite3
import sys
from pathlib import Path
from typing import List, Optional

from .config import ImportConfig
from .exceptions import ConfigurationError
from .logger import setup_logger
from .reporting import LoggingLogSink, NullLogSink, NullStepReporter, TqdmStepReporter
from .service import import_history


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Safariの閲覧履歴(History.db)をChromeの履歴(History)にインポート",
    )
    parser.add_argument("safari_db", help="Safari History.dbのパス")
    parser.add_argument("chrome_db", help="Chrome Historyのパス（Chromeを終了してから実行）")
    parser.add_argument("--verbose", action="store_true", help="処理内容を出力")
    parser.add_argument("--progress", action="store_true", help="プログレスバーを表示")
    parser.add_argument("--config", type=str, help="設定ファイル(YAML)のパス")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    try:
        config = ImportConfig.load(Path(args.config) if args.config else None)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger = setup_logger(config.log_level, config.log_file, use_tqdm=args.progress)
    log = LoggingLogSink(logger) if args.verbose else NullLogSink()
    if args.progress:
        progress = TqdmStepReporter(
            bar_format=config.progress.bar_format,
            remainder_mark=config.progress.remainder_mark,
            progress_mark=config.progress.progress_mark,
            unit=config.progress.unit,
        )
    else:
        progress = NullStepReporter()

    try:
        summary = import_history(args.safari_db, args.chrome_db, log=log, progress=progress)
    except (sqlite3.Error, OSError) as exc:
        print(f"Error: インポートに失敗しました: {exc}", file=sys.stderr)
        return 1

    if args.progress:
        print("Removed %d duplicates" % summary.duplicates_removed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
