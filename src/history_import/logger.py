"""
ロギング設定モジュール
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .reporting import TqdmLoggingHandler

# 各モジュールの logging.getLogger(__name__) はこのロガーの子になる
LOGGER_NAME = __name__.rpartition(".")[0]


def setup_logger(
    log_level: str = "INFO", log_file: Optional[str] = None, use_tqdm: bool = False
) -> logging.Logger:
    """
    ロガーのセットアップ

    Args:
        log_level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: ログファイルのパス（Noneでファイル出力なし）
        use_tqdm: プログレスバー表示中はtqdm.write経由で出力する

    Returns:
        設定済みのロガー
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console: logging.Handler = TqdmLoggingHandler() if use_tqdm else logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter("%(levelname)-5s %(message)s"))
    logger.addHandler(console)

    if log_file:
        # ログディレクトリの作成
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
