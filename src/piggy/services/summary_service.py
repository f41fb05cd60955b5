"""
Summary service - read-only views over a ledger snapshot.

Pure functions of a LedgerState; nothing here mutates or persists.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List

from piggy.model.ledger import LedgerState, Transaction, TransactionCategory, TransactionKind


@dataclass
class HistoryEntry:
    """A transaction paired with the balance right after it was applied."""

    transaction: Transaction
    balance_after: Decimal


class SummaryService:
    """Derived views for display: recent history and spending breakdown."""

    def recent_history(self, state: LedgerState, limit: int = 5) -> List[HistoryEntry]:
        """
        Most recent transactions, newest first, with running balances.

        Walks backwards from the current balance, undoing each transaction
        in turn, so the first entry's balance_after equals the current balance.

        Args:
            state: Ledger snapshot
            limit: Maximum number of entries

        Returns:
            Up to ``limit`` HistoryEntry items ordered by date descending
        """
        newest_first = sorted(state.transactions, key=lambda t: t.date, reverse=True)[: max(limit, 0)]
        running = state.current_balance
        entries: List[HistoryEntry] = []
        for txn in newest_first:
            entries.append(HistoryEntry(transaction=txn, balance_after=running))
            running -= txn.signed_amount
        return entries

    def expense_totals_by_category(self, state: LedgerState) -> Dict[TransactionCategory, Decimal]:
        """Sum of expense amounts per category, largest first.

        Categories without expenses are omitted.
        """
        totals: Dict[TransactionCategory, Decimal] = {}
        for txn in state.transactions:
            if txn.kind != TransactionKind.expense:
                continue
            totals[txn.category] = totals.get(txn.category, Decimal("0")) + txn.amount
        return dict(sorted(totals.items(), key=lambda kv: kv[1], reverse=True))


__all__ = ["SummaryService", "HistoryEntry"]
