from __future__ import annotations

"""
Expense totals per category.
"""

from decimal import Decimal

from rich.table import Table

from piggy.services.summary_service import SummaryService
from piggy.workspace import Workspace

from .util import console, fmt_money, open_store


def run(*, workspace: Workspace) -> int:
    store = open_store(workspace)
    totals = SummaryService().expense_totals_by_category(store.snapshot())

    if not totals:
        console.print("[yellow]No expenses recorded.[/]")
        return 0

    grand_total = sum(totals.values(), Decimal("0"))

    table = Table(title="Spending by Category")
    table.add_column("Category", style="cyan")
    table.add_column("Spent", style="yellow", justify="right")
    table.add_column("Share", style="magenta", justify="right")
    for category, total in totals.items():
        share = (total / grand_total * 100) if grand_total else Decimal("0")
        table.add_row(category.value, fmt_money(total), f"{share:.1f}%")

    console.print(table)
    console.print(f"\n[bold]Total Spent:[/] {fmt_money(grand_total)}")
    return 0
