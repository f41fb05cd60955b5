from __future__ import annotations

"""
Fund a reward goal from the current balance.
"""

from piggy.workspace import Workspace

from .util import console, open_store, parse_positive_amount


def run(*, position: int, amount: str, workspace: Workspace) -> int:
    """Deposit into the reward at a 1-based position of the priority list.

    Returns:
        Exit code (0 = deposited, 1 = rejected)
    """
    store = open_store(workspace)
    if not store.rewards:
        console.print("[yellow]No Reward Selected:[/] create a reward goal first.")
        return 1

    value = parse_positive_amount(amount)
    if value is None:
        console.print("[red]Invalid Amount:[/] Please enter a valid positive amount.")
        return 1

    ids = store.reward_ids_at([position - 1])
    if not ids:
        console.print("[yellow]No Reward Selected:[/] Please select a reward goal.")
        return 1

    outcome = store.deposit_to_reward(ids[0], value)
    if outcome.success:
        console.print(f"[green]Deposit Successful:[/] {outcome.message}")
        return 0
    console.print(f"[red]Deposit Failed:[/] {outcome.message}")
    return 1
