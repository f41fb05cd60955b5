from __future__ import annotations

"""
Set the base allowance.
"""

from piggy.workspace import Workspace

from .util import console, fmt_money, open_store, parse_amount


def run(*, amount: str, workspace: Workspace) -> int:
    """Overwrite the allowance.

    Args:
        amount: Amount text as entered by the user
        workspace: Workspace holding the ledger

    Returns:
        Exit code (0 = success, 1 = invalid amount)
    """
    value = parse_amount(amount)
    if value is None:
        console.print(f"[red]Error:[/] '{amount}' is not a valid amount")
        return 1

    store = open_store(workspace)
    store.set_allowance(value)
    console.print(f"[green]Allowance set to {fmt_money(value)}[/]")
    console.print(f"[bold]Current Balance:[/] {fmt_money(store.current_balance())}")
    return 0
