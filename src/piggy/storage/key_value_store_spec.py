"""
Tests for key-value stores.
"""

from __future__ import annotations

import sqlite3
import tempfile
from pathlib import Path

import pytest

from piggy.storage.key_value_store import InMemoryKeyValueStore, SqliteKeyValueStore


class DescribeSqliteKeyValueStore:
    @pytest.fixture
    def temp_db_path(self):
        """Create a temporary database path inside a throwaway directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir) / "nested" / "ledger.db"

    def it_should_create_parent_directories(self, temp_db_path):
        kv = SqliteKeyValueStore(temp_db_path)
        assert temp_db_path.parent.is_dir()

        kv.set("allowance", b'"0"')
        assert temp_db_path.exists()

    def it_should_defer_opening_the_file_until_first_use(self, temp_db_path):
        temp_db_path.parent.mkdir(parents=True)
        temp_db_path.write_bytes(b"this is not a sqlite database at all" * 10)

        kv = SqliteKeyValueStore(temp_db_path)

        with pytest.raises(sqlite3.DatabaseError):
            kv.get("allowance")
        with pytest.raises(sqlite3.DatabaseError):
            kv.set("allowance", b'"1"')

    def it_should_return_none_for_missing_keys(self, temp_db_path):
        kv = SqliteKeyValueStore(temp_db_path)
        assert kv.get("allowance") is None

    def it_should_overwrite_existing_keys(self, temp_db_path):
        kv = SqliteKeyValueStore(temp_db_path)
        kv.set("allowance", b'"1"')
        kv.set("allowance", b'"2"')
        assert kv.get("allowance") == b'"2"'

    def it_should_write_many_keys_at_once(self, temp_db_path):
        kv = SqliteKeyValueStore(temp_db_path)
        kv.set_many({"a": b"1", "b": b"2"})
        assert kv.get("a") == b"1"
        assert kv.get("b") == b"2"

    def it_should_survive_reopening(self, temp_db_path):
        SqliteKeyValueStore(temp_db_path).set("rewards", b"[]")
        assert SqliteKeyValueStore(temp_db_path).get("rewards") == b"[]"


class DescribeInMemoryKeyValueStore:
    def it_should_store_and_return_bytes(self):
        kv = InMemoryKeyValueStore()
        kv.set("k", b"v")
        assert kv.get("k") == b"v"
        assert kv.keys() == ["k"]

    def it_should_accept_initial_contents(self):
        kv = InMemoryKeyValueStore({"k": b"v"})
        assert kv.get("k") == b"v"
        assert kv.get("other") is None
