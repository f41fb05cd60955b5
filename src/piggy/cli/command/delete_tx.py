from __future__ import annotations

"""
Delete a single transaction by id prefix.
"""

from piggy.workspace import Workspace

from .util import console, fmt_money, open_store

MIN_PREFIX_LENGTH = 8


def run(*, txid: str, workspace: Workspace, write: bool = False) -> int:
    """Find one transaction by id prefix and delete it.

    Args:
        txid: Transaction id or prefix (>= 8 characters, case-insensitive)
        workspace: Workspace holding the ledger
        write: Persist the deletion (default: dry-run)

    Returns:
        Exit code (0 = success, 1 = bad/ambiguous/unknown prefix)
    """
    prefix = (txid or "").strip().lower()
    if len(prefix) < MIN_PREFIX_LENGTH:
        console.print(f"[red]Error:[/] --txid must be at least {MIN_PREFIX_LENGTH} characters")
        return 1

    store = open_store(workspace)
    matches = [t for t in store.transactions if t.id.lower().startswith(prefix)]
    if not matches:
        console.print(f"[yellow]No transaction matches[/] [bold]{prefix}[/]")
        return 1
    if len(matches) > 1:
        console.print(
            f"[yellow]Ambiguous prefix[/] [bold]{prefix}[/]: matches {len(matches)} transactions. "
            "Refine with more characters to disambiguate."
        )
        return 1

    txn = matches[0]
    summary = f"{txn.date:%Y-%m-%d} {txn.kind.value} {fmt_money(txn.amount)} '{txn.reason}'"
    if not write:
        console.print(f"[dim]Dry-run:[/] would delete {summary}. Use --write to persist.")
        return 0

    store.delete_transaction(txn.id)
    console.print(f"[green]Deleted[/] {summary}")
    console.print(f"[bold]Current Balance:[/] {fmt_money(store.current_balance())}")
    return 0
