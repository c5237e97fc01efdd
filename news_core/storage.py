##########################################################################################
#
# Script name: storage.py
#
# Description: Key/value storage backends shared by the article cache and the
#              preferences store.
#
##########################################################################################

import sqlite3
from pathlib import Path
from typing import Iterable, Protocol


# ****************************************************************************************
# Classes
# ****************************************************************************************


class Storage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_items(self, keys: Iterable[str]) -> None: ...

    def keys(self) -> list[str]: ...


class MemoryStorage:
    '''
    Process-local storage, used in tests and when no database path is configured.
    '''

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_items(self, keys: Iterable[str]) -> None:
        for key in list(keys):
            self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class SqliteStorage:
    '''
    String values in a single SQLite table keyed by name.
    '''

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(self.path) as conn:
            conn.execute(
                '''
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                '''
            )

    def get_item(self, key: str) -> str | None:
        with sqlite3.connect(self.path) as conn:
            row = conn.execute('SELECT value FROM kv WHERE key = ?', (key,)).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        # Whole-value replacement; there is no merge.
        with sqlite3.connect(self.path) as conn:
            conn.execute(
                'INSERT OR REPLACE INTO kv (key, value, updated) VALUES (?, ?, CURRENT_TIMESTAMP)',
                (key, value),
            )

    def remove_items(self, keys: Iterable[str]) -> None:
        rows = [(key,) for key in keys]
        if not rows:
            return
        with sqlite3.connect(self.path) as conn:
            conn.executemany('DELETE FROM kv WHERE key = ?', rows)

    def keys(self) -> list[str]:
        with sqlite3.connect(self.path) as conn:
            return [row[0] for row in conn.execute('SELECT key FROM kv ORDER BY key')]
