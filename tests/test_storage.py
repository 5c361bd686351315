"""
Tests for the episode table: drop/create/put lifecycle.
"""

import sqlite3

import pytest

from errors import StorageError
from models import Episode
from storage.db import EpisodeTable


@pytest.fixture
def table(tmp_path):
    """Create a temporary EpisodeTable for testing."""
    t = EpisodeTable(tmp_path / "data" / "local.db")
    yield t
    t.close()


def _episodes(*names):
    return [Episode(name=n, description=f"About {n}") for n in names]


class TestLifecycle:
    def test_drop_missing_table(self, table):
        assert table.exists() is False
        assert table.drop_if_exists() is False

    def test_create_then_drop(self, table):
        table.create()
        assert table.exists()
        assert table.drop_if_exists() is True
        assert not table.exists()

    def test_create_twice_fails(self, table):
        table.create()
        with pytest.raises(StorageError):
            table.create()

    def test_count_without_table(self, table):
        assert table.count() == 0
        assert table.get("A") is None


class TestReplaceAll:
    def test_writes_every_episode(self, table):
        written = table.replace_all(_episodes("A", "B", "C"))
        assert written == 3
        assert table.count() == 3
        assert table.get("B") == {"Name": "B", "Description": "About B"}

    def test_previous_rows_are_gone(self, table):
        table.replace_all(_episodes("Old 1", "Old 2"))
        table.replace_all(_episodes("New"))
        assert table.count() == 1
        assert table.get("Old 1") is None

    def test_same_name_overwrites(self, table):
        episodes = [
            Episode(name="A", description="first"),
            Episode(name="A", description="second"),
        ]
        assert table.replace_all(episodes) == 2
        assert table.count() == 1
        assert table.get("A")["Description"] == "second"

    def test_empty_list(self, table):
        assert table.replace_all([]) == 0
        assert table.exists()
        assert table.count() == 0

    def test_persists_across_connections(self, tmp_path):
        path = tmp_path / "local.db"
        t = EpisodeTable(path)
        t.replace_all(_episodes("A"))
        t.close()

        conn = sqlite3.connect(str(path))
        rows = conn.execute('SELECT Name, Description FROM "Program"').fetchall()
        conn.close()
        assert rows == [("A", "About A")]


class TestOpen:
    def test_unopenable_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(StorageError):
            EpisodeTable(blocker / "sub" / "local.db")
