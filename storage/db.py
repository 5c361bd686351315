"""
SQLite storage. One file, one connection, no ORM.

The episode table is a plain key-value table:
- Name (TEXT PRIMARY KEY)
- Description (TEXT)

It is dropped and recreated on every run, so its contents always mirror
the last successful collection. A put on an existing Name overwrites it.
"""

import logging
import sqlite3
from pathlib import Path

from errors import StorageError
from models import Episode

log = logging.getLogger(__name__)

TABLE_NAME = "Program"
KEY_ATTRIBUTE = "Name"


class EpisodeTable:
    def __init__(self, db_path: Path, table_name: str = TABLE_NAME):
        self.db_path = db_path
        self.table_name = table_name
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(db_path))
            self._conn.execute("PRAGMA journal_mode=WAL")
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open database {db_path}: {e}") from e
        self._conn.row_factory = sqlite3.Row

    def exists(self) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
            (self.table_name,),
        ).fetchone()
        return row is not None

    def drop_if_exists(self) -> bool:
        """Drop the table. Returns True if there was one to drop."""
        if not self.exists():
            return False
        try:
            self._conn.execute(f'DROP TABLE "{self.table_name}"')
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to drop table {self.table_name}: {e}") from e
        log.info(f"Dropped table {self.table_name}")
        return True

    def create(self):
        """Create the table with Name as its single key attribute."""
        try:
            self._conn.execute(
                f'CREATE TABLE "{self.table_name}" ('
                f"{KEY_ATTRIBUTE} TEXT PRIMARY KEY, "
                "Description TEXT NOT NULL DEFAULT ''"
                ")"
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to create table {self.table_name}: {e}") from e
        log.info(f"Created table {self.table_name}")

    def put_item(self, episode: Episode):
        """Insert or overwrite one row keyed by episode name."""
        try:
            self._conn.execute(
                f'INSERT OR REPLACE INTO "{self.table_name}" (Name, Description) VALUES (?, ?)',
                (episode.name, episode.description),
            )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to put item {episode.name!r}: {e}") from e

    def put_items(self, episodes: list[Episode]) -> int:
        """Put every episode, then commit once. Returns rows written."""
        for episode in episodes:
            self.put_item(episode)
        try:
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to commit items: {e}") from e
        return len(episodes)

    def replace_all(self, episodes: list[Episode]) -> int:
        """Drop, recreate, insert. The whole table is rebuilt from this list."""
        self.drop_if_exists()
        self.create()
        written = self.put_items(episodes)
        log.info(f"Wrote {written} items to {self.table_name} ({self.count()} rows)")
        return written

    def count(self) -> int:
        if not self.exists():
            return 0
        return self._conn.execute(
            f'SELECT COUNT(*) FROM "{self.table_name}"'
        ).fetchone()[0]

    def get(self, name: str) -> dict | None:
        """Look up one row by key."""
        if not self.exists():
            return None
        row = self._conn.execute(
            f'SELECT Name, Description FROM "{self.table_name}" WHERE Name = ?',
            (name,),
        ).fetchone()
        if not row:
            return None
        return {"Name": row["Name"], "Description": row["Description"]}

    def close(self):
        self._conn.close()
