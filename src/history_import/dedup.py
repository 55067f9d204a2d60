"""Duplicate visit removal for the Chrome history database."""

from __future__ import annotations

import sqlite3
from typing import Optional

from .reporting import LogSink, NullLogSink

# 同じURL・同じ訪問時刻の訪問は、IDが最大の行だけを残す
DELETE_DUPLICATE_VISITS_SQL = """
    DELETE FROM visits
    WHERE id IN (
        SELECT v.id
        FROM visits v
        LEFT JOIN visits v2
            ON v2.url = v.url
            AND v2.visit_time = v.visit_time
            AND v2.id > v.id
        WHERE v2.id IS NOT NULL
    )
"""


def remove_duplicates(conn: sqlite3.Connection, log: Optional[LogSink] = None) -> int:
    """
    重複した訪問行を削除

    Args:
        conn: Chrome Historyへの接続
        log: 削除件数の出力先

    Returns:
        削除件数
    """
    log = log or NullLogSink()
    with conn:
        deleted_count = conn.execute(DELETE_DUPLICATE_VISITS_SQL).rowcount
    log.info("deleted %d duplicates", deleted_count)
    return deleted_count
