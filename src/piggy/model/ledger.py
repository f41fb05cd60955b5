from __future__ import annotations

"""
Ledger data models for the allowance tracker.

Scope
- Pure Pydantic v2 models; no I/O.
- Transaction and RewardGoal are the two entity types owned by a ledger.
- LedgerState is the aggregate snapshot that gets persisted and restored.

Amounts are Decimal throughout and are serialized as strings so a
save/load cycle never loses precision. Timestamps are ISO-8601 strings.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value)
    return Decimal(str(value))


def to_naive_local(value: datetime) -> datetime:
    """Convert an offset-aware timestamp to naive local time; naive ones pass through.

    Ledger timestamps are all naive local time so they stay mutually comparable.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class TransactionKind(str, Enum):
    income = "income"
    expense = "expense"


class TransactionCategory(str, Enum):
    food = "Food"
    clothing = "Clothing"
    transport = "Transport"
    entertainment = "Entertainment"
    reward_deposit = "Reward Deposit"
    misc = "Misc"


class Transaction(BaseModel):
    """A single income or expense entry.

    Transactions are immutable once recorded; the ledger only ever appends or
    removes them.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    amount: Decimal
    reason: str
    kind: TransactionKind
    date: datetime = Field(default_factory=datetime.now)
    category: TransactionCategory = TransactionCategory.misc

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it contributes to the balance (expenses negative)."""
        return self.amount if self.kind == TransactionKind.income else -self.amount

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return value.isoformat()

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Decimal:
        return _to_decimal(value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> datetime:
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            return to_naive_local(value)
        return value


class RewardGoal(BaseModel):
    """A named savings target funded from the ledger balance.

    ``progress_amount`` may exceed ``goal_amount``; over-funding a goal is
    allowed.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    goal_amount: Decimal
    progress_amount: Decimal = Decimal("0")
    priority: int

    @property
    def is_complete(self) -> bool:
        return self.progress_amount >= self.goal_amount

    @field_serializer("goal_amount", "progress_amount")
    def serialize_amounts(self, value: Decimal) -> str:
        return str(value)

    @field_validator("goal_amount", "progress_amount", mode="before")
    @classmethod
    def parse_amounts(cls, value: Any) -> Decimal:
        return _to_decimal(value)


def sort_by_priority(rewards: List[RewardGoal]) -> List[RewardGoal]:
    """Return rewards in ascending priority; ties keep their insertion order."""
    return sorted(rewards, key=lambda r: r.priority)


class LedgerState(BaseModel):
    """Aggregate snapshot of everything a ledger owns."""

    allowance: Decimal = Decimal("0")
    transactions: List[Transaction] = Field(default_factory=list)
    rewards: List[RewardGoal] = Field(default_factory=list)
    last_reset_date: datetime = Field(default_factory=datetime.now)

    @property
    def total_income(self) -> Decimal:
        return sum(
            (t.amount for t in self.transactions if t.kind == TransactionKind.income),
            Decimal("0"),
        )

    @property
    def total_expenses(self) -> Decimal:
        return sum(
            (t.amount for t in self.transactions if t.kind == TransactionKind.expense),
            Decimal("0"),
        )

    @property
    def current_balance(self) -> Decimal:
        return self.allowance + self.total_income - self.total_expenses

    @field_serializer("allowance")
    def serialize_allowance(self, value: Decimal) -> str:
        return str(value)

    @field_validator("allowance", mode="before")
    @classmethod
    def parse_allowance(cls, value: Any) -> Decimal:
        return _to_decimal(value)


__all__ = [
    "TransactionKind",
    "TransactionCategory",
    "Transaction",
    "RewardGoal",
    "LedgerState",
    "sort_by_priority",
    "to_naive_local",
]
