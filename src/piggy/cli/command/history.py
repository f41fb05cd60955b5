from __future__ import annotations

"""
Recent transactions with the running balance after each.
"""

from rich.table import Table

from piggy.model.ledger import TransactionKind
from piggy.services.summary_service import SummaryService
from piggy.workspace import Workspace

from .util import console, fmt_amount, fmt_money, open_store


def run(*, limit: int = 5, workspace: Workspace) -> int:
    """Show the newest transactions first.

    Args:
        limit: Max number of rows to show
        workspace: Workspace holding the ledger

    Returns:
        Exit code (always 0)
    """
    store = open_store(workspace)
    entries = SummaryService().recent_history(store.snapshot(), limit=limit)

    if not entries:
        console.print("[yellow]No transactions yet.[/]")
        return 0

    table = Table(title="Recent Transactions", show_lines=False)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Reason", style="white")
    table.add_column("Category", style="blue")
    table.add_column("Amount", justify="right")
    table.add_column("Balance", justify="right", style="italic")

    for entry in entries:
        txn = entry.transaction
        amount = txn.amount if txn.kind == TransactionKind.income else -txn.amount
        table.add_row(
            txn.date.strftime("%Y-%m-%d"),
            txn.id[:8],
            txn.reason,
            txn.category.value,
            fmt_amount(amount),
            fmt_money(entry.balance_after),
        )

    console.print(table)
    return 0
