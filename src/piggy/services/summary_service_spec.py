from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from piggy.model.ledger import LedgerState, Transaction, TransactionCategory, TransactionKind
from piggy.services.summary_service import SummaryService


def _txn(amount: str, kind: TransactionKind, day: int, category=TransactionCategory.misc) -> Transaction:
    return Transaction(
        amount=Decimal(amount),
        reason=f"day {day}",
        kind=kind,
        date=datetime(2025, 5, day),
        category=category,
    )


class DescribeSummaryService:
    @pytest.fixture
    def service(self):
        return SummaryService()

    @pytest.fixture
    def state(self):
        return LedgerState(
            allowance=Decimal("100"),
            transactions=[
                _txn("20", TransactionKind.income, 3, TransactionCategory.reward_deposit),
                _txn("5", TransactionKind.expense, 1, TransactionCategory.food),
                _txn("12", TransactionKind.expense, 7, TransactionCategory.entertainment),
                _txn("8", TransactionKind.expense, 5, TransactionCategory.food),
            ],
        )

    class DescribeRecentHistory:
        def it_should_order_newest_first(self, service, state):
            entries = service.recent_history(state, limit=10)
            assert [e.transaction.date.day for e in entries] == [7, 5, 3, 1]

        def it_should_walk_running_balance_backwards_from_current(self, service, state):
            entries = service.recent_history(state, limit=10)
            assert state.current_balance == Decimal("95")
            assert [e.balance_after for e in entries] == [
                Decimal("95"),
                Decimal("107"),
                Decimal("115"),
                Decimal("95"),
            ]

        def it_should_respect_the_limit(self, service, state):
            assert len(service.recent_history(state)) == 4
            assert len(service.recent_history(state, limit=2)) == 2

        def it_should_return_nothing_for_an_empty_ledger(self, service):
            assert service.recent_history(LedgerState()) == []

    class DescribeExpenseTotalsByCategory:
        def it_should_sum_expenses_per_category_largest_first(self, service, state):
            totals = service.expense_totals_by_category(state)
            assert list(totals.items()) == [
                (TransactionCategory.food, Decimal("13")),
                (TransactionCategory.entertainment, Decimal("12")),
            ]

        def it_should_ignore_income(self, service, state):
            totals = service.expense_totals_by_category(state)
            assert TransactionCategory.reward_deposit not in totals
