"""Safari history extractor."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .models import URLEntity, VisitRecord
from .timeconv import from_safari

# hi.idでまとめるため、同じURLの行が連続するように並べる
VISITS_QUERY = """
    SELECT hi.id, hi.url, hv.title, hi.visit_count, hv.visit_time
    FROM history_visits hv
    INNER JOIN history_items hi ON hi.id = hv.history_item
    ORDER BY hi.id, hv.visit_time
"""

STEP_COUNT_QUERY = """
    SELECT COUNT(DISTINCT hi.id) + COUNT(*)
    FROM history_visits hv
    INNER JOIN history_items hi ON hi.id = hv.history_item
"""


@dataclass
class _PendingEntity:
    """組み立て中のURLエンティティ"""

    item_id: Optional[int] = None
    url: Optional[str] = None
    visit_count: int = 0
    visits: List[VisitRecord] = field(default_factory=list)

    def build(self) -> Optional[URLEntity]:
        if self.item_id is None:
            return None
        return URLEntity(url=self.url, visit_count=self.visit_count, visits=self.visits)


def iter_url_entities(conn: sqlite3.Connection) -> Iterator[URLEntity]:
    """
    Safari履歴DBをhistory_items.id順に1回だけ走査し、URLごとにまとめて返す

    ジェネレータなので再実行はできない。メモリに保持するのは
    処理中の1URL分の訪問のみ。

    Args:
        conn: Safari History.dbへの接続

    Yields:
        訪問履歴付きのURLEntity（visitsは空にならない）
    """
    pending = _PendingEntity()
    for item_id, url, title, visit_count, visit_time in conn.execute(VISITS_QUERY):
        if item_id != pending.item_id:
            entity = pending.build()
            if entity is not None:
                yield entity
            pending = _PendingEntity(item_id=item_id, url=url, visit_count=visit_count)
        pending.visits.append(VisitRecord(visit_time=from_safari(visit_time), title=title))

    entity = pending.build()
    if entity is not None:
        yield entity


def step_count(conn: sqlite3.Connection) -> int:
    """インポートの総ステップ数（URL数 + 訪問数）"""
    return conn.execute(STEP_COUNT_QUERY).fetchone()[0]
