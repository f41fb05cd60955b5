"""Persistence backends for the ledger snapshot."""

from piggy.storage.key_value_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    SqliteKeyValueStore,
)
from piggy.storage.ledger_repository import LedgerRepository, PersistenceError

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqliteKeyValueStore",
    "LedgerRepository",
    "PersistenceError",
]
