"""
Ledger snapshot persistence.

LedgerRepository maps a LedgerState onto four keys of a KeyValueStore:

- transactions: JSON array of Transaction
- rewards: JSON array of RewardGoal
- allowance: JSON string holding a decimal
- lastResetDate: JSON string holding an ISO-8601 timestamp

Loading is forgiving: each key that is missing or fails to decode falls back
to its default on its own, so one bad blob never costs the others.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from piggy.config import (
    KEY_ALLOWANCE,
    KEY_LAST_RESET_DATE,
    KEY_REWARDS,
    KEY_TRANSACTIONS,
    LEDGER_KEYS,
)
from piggy.model.ledger import (
    LedgerState,
    RewardGoal,
    Transaction,
    sort_by_priority,
    to_naive_local,
)
from piggy.storage.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

_TRANSACTIONS = TypeAdapter(List[Transaction])
_REWARDS = TypeAdapter(List[RewardGoal])

_DECODE_ERRORS = (ValueError, ValidationError, InvalidOperation, TypeError, UnicodeDecodeError)


class PersistenceError(Exception):
    """Raised when a ledger snapshot could not be written."""


def encode_state(state: LedgerState) -> Dict[str, bytes]:
    """Serialize a snapshot into the per-key blobs written to storage."""
    return {
        KEY_TRANSACTIONS: _TRANSACTIONS.dump_json(state.transactions),
        KEY_REWARDS: _REWARDS.dump_json(state.rewards),
        KEY_ALLOWANCE: json.dumps(str(state.allowance)).encode("utf-8"),
        KEY_LAST_RESET_DATE: json.dumps(state.last_reset_date.isoformat()).encode("utf-8"),
    }


class LedgerRepository:
    """Loads and saves LedgerState snapshots through a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(self, state: LedgerState) -> None:
        """Overwrite all ledger keys with the given snapshot.

        Raises:
            PersistenceError: if the backend raises anything while writing
        """
        blobs = encode_state(state)
        try:
            set_many = getattr(self.store, "set_many", None)
            if set_many is not None:
                set_many(blobs)
            else:
                for key in LEDGER_KEYS:
                    self.store.set(key, blobs[key])
        except Exception as e:
            raise PersistenceError(f"Failed to save ledger: {e}") from e

    def load(self, clock: Callable[[], datetime] = datetime.now) -> LedgerState:
        """Read a snapshot, substituting defaults for absent or corrupt keys.

        Args:
            clock: Source of "now" used when no lastResetDate is stored

        Returns:
            LedgerState with rewards sorted by ascending priority
        """
        transactions = self._load_key(KEY_TRANSACTIONS, _TRANSACTIONS.validate_json) or []
        rewards = self._load_key(KEY_REWARDS, _REWARDS.validate_json) or []
        allowance = self._load_key(KEY_ALLOWANCE, _decode_decimal)
        last_reset = self._load_key(KEY_LAST_RESET_DATE, _decode_datetime)

        return LedgerState(
            allowance=allowance if allowance is not None else Decimal("0"),
            transactions=transactions,
            rewards=sort_by_priority(rewards),
            last_reset_date=last_reset if last_reset is not None else clock(),
        )

    def _load_key(self, key: str, decode: Callable[[bytes], object]) -> Optional[object]:
        try:
            raw = self.store.get(key)
        except Exception as e:
            logger.warning("Could not read %s from storage, using default: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return decode(raw)
        except _DECODE_ERRORS as e:
            logger.warning("Stored %s is unreadable, using default: %s", key, e)
            return None


def _decode_decimal(raw: bytes) -> Decimal:
    value = json.loads(raw)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"Not a decimal: {value!r}")
    return Decimal(str(value))


def _decode_datetime(raw: bytes) -> datetime:
    value = json.loads(raw)
    if not isinstance(value, str):
        raise ValueError(f"Not a timestamp: {value!r}")
    return to_naive_local(datetime.fromisoformat(value))


__all__ = ["LedgerRepository", "PersistenceError", "encode_state"]
