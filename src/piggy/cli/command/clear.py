from __future__ import annotations

"""
Remove every transaction from the ledger.
"""

from piggy.workspace import Workspace

from .util import console, fmt_money, open_store


def run(*, workspace: Workspace, yes: bool = False) -> int:
    """Clear all transactions. Irreversible, so requires yes=True.

    Returns:
        Exit code (0 = cleared, 1 = not confirmed)
    """
    if not yes:
        console.print("[yellow]This deletes every transaction and cannot be undone.[/] Re-run with --yes.")
        return 1

    store = open_store(workspace)
    count = len(store.transactions)
    store.clear_all_transactions()
    console.print(f"[green]Cleared {count} transaction(s).[/]")
    console.print(f"[bold]Current Balance:[/] {fmt_money(store.current_balance())}")
    return 0
