"""Initialize a new piggy workspace directory."""

from __future__ import annotations

from piggy.workspace import Workspace

from .util import console, open_store


def run(*, workspace: Workspace) -> int:
    """Create the data directory and an empty ledger database.

    Safe to run on an existing workspace; existing ledger data is kept.

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    existed = workspace.has_ledger
    workspace.ensure_data_dir()
    console.print(f"[bold cyan]Initializing workspace:[/] {workspace.root}\n")

    store = open_store(workspace)
    if existed:
        console.print(f"  [dim]Exists:[/]  {workspace.ledger_db_path}")
    else:
        store.save()
        console.print(f"  [green]Created:[/] {workspace.ledger_db_path}")

    console.print("\n[bold]Next steps:[/]")
    console.print("  piggy allowance 50")
    console.print("  piggy add-reward \"New bike\" 200")
    return 0
