"""
Tests for ledger models.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from piggy.model.ledger import (
    LedgerState,
    RewardGoal,
    Transaction,
    TransactionCategory,
    TransactionKind,
    sort_by_priority,
)


class DescribeTransaction:
    def it_should_parse_amount_strings_without_float_rounding(self):
        txn = Transaction(amount="0.10", reason="gum", kind=TransactionKind.expense)
        assert txn.amount == Decimal("0.10")

    def it_should_serialize_amount_and_date_as_strings(self):
        txn = Transaction(
            id="t-1",
            amount=Decimal("12.50"),
            reason="bus",
            kind=TransactionKind.expense,
            date=datetime(2025, 4, 1, 12, 0),
            category=TransactionCategory.transport,
        )
        data = txn.model_dump(mode="json")
        assert data == {
            "id": "t-1",
            "amount": "12.50",
            "reason": "bus",
            "kind": "expense",
            "date": "2025-04-01T12:00:00",
            "category": "Transport",
        }

    def it_should_be_immutable(self):
        txn = Transaction(amount=Decimal("1"), reason="x", kind=TransactionKind.income)
        with pytest.raises(ValidationError):
            txn.amount = Decimal("2")

    def it_should_sign_amounts_by_kind(self):
        income = Transaction(amount=Decimal("3"), reason="x", kind=TransactionKind.income)
        expense = Transaction(amount=Decimal("3"), reason="x", kind=TransactionKind.expense)
        assert income.signed_amount == Decimal("3")
        assert expense.signed_amount == Decimal("-3")

    def it_should_reject_unknown_category_tags(self):
        with pytest.raises(ValidationError):
            Transaction.model_validate(
                {"amount": "1", "reason": "x", "kind": "income", "category": "Groceries"}
            )

    def it_should_store_offset_dates_as_naive_local_time(self):
        aware = datetime(2025, 7, 4, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        txn = Transaction(amount="1", reason="x", kind=TransactionKind.expense, date=aware)
        assert txn.date.tzinfo is None
        assert txn.date == aware.astimezone().replace(tzinfo=None)

    def it_should_keep_offset_dates_comparable_with_naive_ones(self):
        parsed = Transaction.model_validate(
            {"amount": "1", "reason": "x", "kind": "income", "date": "2025-07-04T10:00+02:00"}
        )
        naive = Transaction(amount="1", reason="y", kind=TransactionKind.income, date=datetime(2025, 7, 5))
        assert sorted([naive, parsed], key=lambda t: t.date) == [parsed, naive]


class DescribeRewardGoal:
    def it_should_start_with_zero_progress(self):
        goal = RewardGoal(title="Bike", goal_amount=Decimal("200"), priority=1)
        assert goal.progress_amount == Decimal("0")
        assert not goal.is_complete

    def it_should_sort_by_priority_keeping_ties_in_insertion_order(self):
        a = RewardGoal(title="a", goal_amount=1, priority=2)
        b = RewardGoal(title="b", goal_amount=1, priority=1)
        c = RewardGoal(title="c", goal_amount=1, priority=2)
        assert [r.title for r in sort_by_priority([a, b, c])] == ["b", "a", "c"]


class DescribeLedgerState:
    def it_should_derive_the_balance(self):
        state = LedgerState(
            allowance=Decimal("10"),
            transactions=[
                Transaction(amount=Decimal("5"), reason="in", kind=TransactionKind.income),
                Transaction(amount=Decimal("2.5"), reason="out", kind=TransactionKind.expense),
            ],
        )
        assert state.total_income == Decimal("5")
        assert state.total_expenses == Decimal("2.5")
        assert state.current_balance == Decimal("12.5")

    def it_should_default_to_an_empty_ledger(self):
        state = LedgerState()
        assert state.allowance == Decimal("0")
        assert state.transactions == []
        assert state.rewards == []
        assert state.current_balance == Decimal("0")
