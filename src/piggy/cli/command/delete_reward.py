from __future__ import annotations

"""
Delete reward goals by their position in the priority-ordered list.
"""

from typing import List

from piggy.workspace import Workspace

from .util import console, open_store


def run(*, positions: List[int], workspace: Workspace) -> int:
    """Delete the rewards shown at the given 1-based positions.

    Positions are resolved against the priority-sorted view to reward ids
    before anything is removed.

    Returns:
        Exit code (0 = success, 1 = a position was out of range)
    """
    store = open_store(workspace)
    count = len(store.rewards)
    bad = [p for p in positions if p < 1 or p > count]
    if bad:
        console.print(
            f"[red]Error:[/] No reward at position(s) {', '.join(str(p) for p in bad)} "
            f"(have {count})"
        )
        return 1

    titles = {r.id: r.title for r in store.rewards}
    ids = store.reward_ids_at(p - 1 for p in positions)
    store.delete_rewards(ids)
    for reward_id in ids:
        console.print(f"[green]Deleted reward[/] [bold]{titles[reward_id]}[/]")
    return 0
