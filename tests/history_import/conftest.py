"""Safari / Chrome 履歴DBのテスト用フィクスチャ"""

import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

SAFARI_SCHEMA = """
    CREATE TABLE history_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        url TEXT NOT NULL UNIQUE,
        domain_expansion TEXT NULL,
        visit_count INTEGER NOT NULL
    );
    CREATE TABLE history_visits (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        history_item INTEGER NOT NULL REFERENCES history_items(id),
        visit_time REAL NOT NULL,
        title TEXT NULL
    );
"""

CHROME_SCHEMA = """
    CREATE TABLE urls (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        url LONGVARCHAR,
        title LONGVARCHAR,
        visit_count INTEGER DEFAULT 0 NOT NULL,
        typed_count INTEGER DEFAULT 0 NOT NULL,
        last_visit_time INTEGER NOT NULL,
        hidden INTEGER DEFAULT 0 NOT NULL,
        favicon_id INTEGER DEFAULT 0 NOT NULL
    );
    CREATE INDEX urls_url_index ON urls (url);
    CREATE TABLE visits (
        id INTEGER PRIMARY KEY,
        url INTEGER NOT NULL,
        visit_time INTEGER NOT NULL,
        from_visit INTEGER,
        transition INTEGER DEFAULT 0 NOT NULL,
        segment_id INTEGER,
        visit_duration INTEGER DEFAULT 0 NOT NULL
    );
"""

# (url, visit_count, [(visit_time, title), ...])
SafariItem = Tuple[str, int, Sequence[Tuple[float, Optional[str]]]]


def populate_safari(conn: sqlite3.Connection, items: Iterable[SafariItem]) -> None:
    """Safari履歴DBにテストデータを投入"""
    for url, visit_count, visits in items:
        item_id = conn.execute(
            "INSERT INTO history_items (url, visit_count) VALUES (?, ?)", (url, visit_count)
        ).lastrowid
        for visit_time, title in visits:
            conn.execute(
                "INSERT INTO history_visits (history_item, visit_time, title) VALUES (?, ?, ?)",
                (item_id, visit_time, title),
            )
    conn.commit()


def create_safari_db(path: Path, items: Iterable[SafariItem] = ()) -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SAFARI_SCHEMA)
        populate_safari(conn, items)
    finally:
        conn.close()
    return path


def create_chrome_db(path: Path) -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.executescript(CHROME_SCHEMA)
        conn.commit()
    finally:
        conn.close()
    return path


class RecordingStepReporter:
    """進捗呼び出しを記録するStepReporter"""

    def __init__(self) -> None:
        self.total: Optional[int] = None
        self.steps: List[int] = []
        self.finished = False

    def start(self, total: int) -> None:
        self.total = total

    def advance(self, n: int = 1) -> None:
        self.steps.append(n)

    def finish(self) -> None:
        self.finished = True

    @property
    def position(self) -> int:
        return sum(self.steps)


@pytest.fixture
def safari_conn():
    """インメモリのSafari履歴DB"""
    conn = sqlite3.connect(":memory:")
    conn.executescript(SAFARI_SCHEMA)
    yield conn
    conn.close()


@pytest.fixture
def chrome_conn():
    """インメモリのChrome履歴DB"""
    conn = sqlite3.connect(":memory:")
    conn.executescript(CHROME_SCHEMA)
    yield conn
    conn.close()


@pytest.fixture
def progress():
    return RecordingStepReporter()


@pytest.fixture
def populate():
    """Safari履歴DBへの投入関数"""
    return populate_safari


@pytest.fixture
def make_safari_db(tmp_path):
    """一時ディレクトリにSafari History.dbを作成する関数"""

    def _make(items: Iterable[SafariItem] = (), name: str = "History.db") -> Path:
        return create_safari_db(tmp_path / name, items)

    return _make


@pytest.fixture
def make_chrome_db(tmp_path):
    """一時ディレクトリにChrome Historyを作成する関数"""

    def _make(name: str = "History") -> Path:
        return create_chrome_db(tmp_path / name)

    return _make
