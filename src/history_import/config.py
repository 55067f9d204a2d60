"""
設定管理モジュール

関連クラス:
  - cli.main: この設定でロガーとプログレスバーを構築
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_BAR_FORMAT = "{percentage:3.0f}% {bar} {n_fmt} of {total_fmt} @ {rate_fmt}"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "history_import.yaml"


@dataclass
class ProgressConfig:
    """プログレスバー設定"""

    bar_format: str = DEFAULT_BAR_FORMAT
    remainder_mark: str = "░"
    progress_mark: str = "█"
    unit: str = "step"


@dataclass
class ImportConfig:
    """インポート設定クラス"""

    # ログ設定
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # プログレスバー設定
    progress: ProgressConfig = None  # type: ignore

    def __post_init__(self):
        """デフォルト値の初期化とログレベルの検証"""
        if self.progress is None:
            self.progress = ProgressConfig()

        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"不正なログレベル: {self.log_level}")
        self.log_level = level

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ImportConfig":
        """設定を読み込む

        config_pathを指定した場合はそのYAMLを、省略時はconfig/history_import.yamlが
        存在すればそれを読み込み、環境変数で上書きする。

        Raises:
            ConfigurationError: 設定ファイルが存在しない、または値が不正な場合
        """
        if config_path is not None:
            config = cls.from_yaml(Path(config_path))
        elif DEFAULT_CONFIG_PATH.exists():
            config = cls.from_yaml(DEFAULT_CONFIG_PATH)
        else:
            config = cls()

        overrides: Dict[str, Any] = {}
        if os.getenv("HISTORY_IMPORT_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("HISTORY_IMPORT_LOG_LEVEL")
        if os.getenv("HISTORY_IMPORT_LOG_FILE"):
            overrides["log_file"] = os.getenv("HISTORY_IMPORT_LOG_FILE")
        return replace(config, **overrides) if overrides else config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ImportConfig":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/history_import.yamlを使用）

        Returns:
            ImportConfig: 設定インスタンス

        Raises:
            ConfigurationError: ファイルが存在しない、またはYAMLとして不正な場合
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"設定ファイルが見つかりません: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"設定ファイルを読み込めません: {config_path}: {e}") from e

        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"設定ファイルの形式が不正です: {config_path}")

        log_data = yaml_data.get("log") or {}
        progress_data = yaml_data.get("progress") or {}

        return cls(
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file"),
            progress=ProgressConfig(
                bar_format=progress_data.get("bar_format", DEFAULT_BAR_FORMAT),
                remainder_mark=progress_data.get("remainder_mark", "░"),
                progress_mark=progress_data.get("progress_mark", "█"),
                unit=progress_data.get("unit", "step"),
            ),
        )
