"""
Key-value stores backing the ledger snapshot.

The ledger persists itself as a handful of named blobs. Anything exposing
``get(key) -> bytes | None`` and ``set(key, value)`` can serve as the
backend; two implementations are provided:

- SqliteKeyValueStore: durable, a single table in a local SQLite file
- InMemoryKeyValueStore: dict-backed, for tests and throwaway sessions

Privacy: the SQLite file is local-only. Never transmit its contents.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, Optional, Protocol


class KeyValueStore(Protocol):
    """Minimal durable storage contract used by LedgerRepository."""

    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store. Contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def keys(self) -> list[str]:
        return list(self._data)


class SqliteKeyValueStore:
    """Key-value store on a local SQLite database.

    Each call opens its own connection so the store can be shared freely;
    writes are committed before ``set`` returns. The table is created on
    first use, so a damaged file surfaces as sqlite3.Error from get/set
    rather than from the constructor.

    Usage:
        kv = SqliteKeyValueStore("data/ledger.db")
        kv.set("allowance", b'"100.00"')
        kv.get("allowance")
    """

    def __init__(self, db_path: str | Path):
        """Initialize store with SQLite database.

        Args:
            db_path: Path to SQLite database file. Created on first write if missing.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._schema_ready = False

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        if not self._schema_ready:
            try:
                self._init_schema(conn)
            except sqlite3.Error:
                conn.close()
                raise
            self._schema_ready = True
        return conn

    def _init_schema(self, conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL,
                updated_at TEXT DEFAULT (datetime('now'))
            )
        """)
        conn.commit()

    def get(self, key: str) -> Optional[bytes]:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return bytes(row[0]) if row is not None else None
        finally:
            conn.close()

    def set(self, key: str, value: bytes) -> None:
        self.set_many({key: value})

    def set_many(self, items: Dict[str, bytes]) -> None:
        """Write several keys in one SQLite transaction."""
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.executemany(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """,
                [(k, sqlite3.Binary(v)) for k, v in items.items()],
            )
            conn.commit()
        finally:
            conn.close()


__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "SqliteKeyValueStore"]
