from __future__ import annotations

"""
Show the allowance, current balance and projected savings.
"""

from piggy.workspace import Workspace

from .util import console, fmt_amount, fmt_money, open_store


def run(*, workspace: Workspace) -> int:
    store = open_store(workspace)
    snapshot = store.snapshot()

    console.print("[bold]Current Balance:[/] ", fmt_amount(snapshot.current_balance))
    console.print(f"[bold]Allowance:[/] {fmt_money(snapshot.allowance)}")
    console.print(f"[bold]Income:[/] {fmt_money(snapshot.total_income)}")
    console.print(f"[bold]Expenses:[/] {fmt_money(snapshot.total_expenses)}")
    console.print(f"[bold]Projected Savings:[/] {fmt_money(store.projected_savings())}")
    return 0
