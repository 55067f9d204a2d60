"""History Importのカスタム例外定義

URL作成失敗のようなエンティティ単位で回復可能なエラーと、
設定エラーを区別するための例外クラスを定義します。
SQLite自体のエラー（sqlite3.Error）はラップせずにそのまま伝播させます。
"""


class HistoryImportError(Exception):
    """History Import基底例外"""

    pass


class URLCreationError(HistoryImportError):
    """移行先にURL行を作成できなかった（このエンティティのみスキップ）"""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{reason}: {url}")
        self.url = url
        self.reason = reason


class ConfigurationError(HistoryImportError):
    """設定エラー"""

    pass
