"""History import data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Chromeのvisits.transition: LINK | CHAIN_START | CHAIN_END
VISIT_TRANSITION = 0x30000008


@dataclass
class VisitRecord:
    """
    1回分の訪問

    Attributes:
        visit_time: 訪問日時（Safariエポックから変換済み、UTC）
        title: 訪問時のページタイトル
    """

    visit_time: datetime
    title: Optional[str]


@dataclass
class URLEntity:
    """
    移行元の1つのURLと、その訪問履歴（訪問日時の昇順）

    Attributes:
        url: URL文字列（実行内で一意）
        visit_count: Safariの累積訪問回数
        visits: 訪問履歴
    """

    url: str
    visit_count: int
    visits: List[VisitRecord] = field(default_factory=list)

    def __str__(self) -> str:
        return self.url


@dataclass
class EntityResult:
    """1エンティティの処理結果"""

    url: str
    status: Optional[str] = None  # "new" / "existing"
    url_id: Optional[int] = None
    visits_inserted: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImportSummary:
    """インポート全体の集計"""

    urls_created: int = 0
    urls_existing: int = 0
    urls_failed: int = 0
    visits_inserted: int = 0
    duplicates_removed: int = 0

    def add(self, result: EntityResult) -> None:
        if not result.ok:
            self.urls_failed += 1
            return
        if result.status == "new":
            self.urls_created += 1
        else:
            self.urls_existing += 1
        self.visits_inserted += result.visits_inserted

    def to_dict(self) -> dict:
        """辞書形式に変換（JSON出力用）"""
        return {
            "urls_created": self.urls_created,
            "urls_existing": self.urls_existing,
            "urls_failed": self.urls_failed,
            "visits_inserted": self.visits_inserted,
            "duplicates_removed": self.duplicates_removed,
        }
