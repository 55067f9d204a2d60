"""Safari履歴の抽出・グルーピングのテスト"""

import inspect

from src.history_import.extractor import iter_url_entities, step_count
from src.history_import.timeconv import from_safari


def test_empty_source(safari_conn):
    """空のDBからは何も返らない"""
    assert list(iter_url_entities(safari_conn)) == []
    assert step_count(safari_conn) == 0


def test_groups_visits_per_url(safari_conn, populate):
    """URLごとに訪問がまとめられ、訪問日時の昇順に並ぶ"""
    populate(
        safari_conn,
        [
            ("https://example.com/", 3, [(300.0, "C"), (100.0, "A"), (200.0, "B")]),
            ("https://github.com/", 1, [(150.0, "GitHub")]),
        ],
    )

    entities = list(iter_url_entities(safari_conn))

    assert [e.url for e in entities] == ["https://example.com/", "https://github.com/"]
    example = entities[0]
    assert example.visit_count == 3
    assert [v.title for v in example.visits] == ["A", "B", "C"]
    assert [v.visit_time for v in example.visits] == [
        from_safari(100.0),
        from_safari(200.0),
        from_safari(300.0),
    ]
    assert entities[1].visit_count == 1
    assert len(entities[1].visits) == 1
    assert str(entities[1]) == "https://github.com/"


def test_interleaved_rows_are_grouped(safari_conn):
    """挿入順が混在していても1URL1エンティティになる"""
    safari_conn.execute("INSERT INTO history_items (id, url, visit_count) VALUES (1, 'https://a/', 2)")
    safari_conn.execute("INSERT INTO history_items (id, url, visit_count) VALUES (2, 'https://b/', 2)")
    for item, time, title in [(1, 10.0, "a1"), (2, 11.0, "b1"), (1, 12.0, "a2"), (2, 13.0, "b2")]:
        safari_conn.execute(
            "INSERT INTO history_visits (history_item, visit_time, title) VALUES (?, ?, ?)",
            (item, time, title),
        )
    safari_conn.commit()

    entities = list(iter_url_entities(safari_conn))

    assert len(entities) == 2
    assert [v.title for v in entities[0].visits] == ["a1", "a2"]
    assert [v.title for v in entities[1].visits] == ["b1", "b2"]


def test_items_without_visits_are_skipped(safari_conn, populate):
    """訪問のないURLはエンティティにならず、ステップ数にも含まれない"""
    populate(
        safari_conn,
        [
            ("https://no-visits.example/", 0, []),
            ("https://example.com/", 2, [(1.0, "x"), (2.0, "y")]),
        ],
    )

    entities = list(iter_url_entities(safari_conn))

    assert [e.url for e in entities] == ["https://example.com/"]
    assert all(e.visits for e in entities)
    assert step_count(safari_conn) == 1 + 2


def test_step_count_matches_urls_plus_visits(safari_conn, populate):
    populate(
        safari_conn,
        [
            ("https://a/", 1, [(1.0, "a")]),
            ("https://b/", 3, [(1.0, "b"), (2.0, "b"), (3.0, "b")]),
        ],
    )
    assert step_count(safari_conn) == 2 + 4


def test_extractor_is_lazy(safari_conn, populate):
    """ジェネレータとして1件ずつ返す"""
    populate(safari_conn, [("https://a/", 1, [(1.0, "a")]), ("https://b/", 1, [(2.0, "b")])])

    entities = iter_url_entities(safari_conn)

    assert inspect.isgenerator(entities)
    assert next(entities).url == "https://a/"
    assert next(entities).url == "https://b/"
    assert list(entities) == []
