from __future__ import annotations

"""
Create a reward goal.
"""

from piggy.workspace import Workspace

from .util import console, fmt_money, open_store, parse_positive_amount


def run(*, title: str, goal: str, workspace: Workspace) -> int:
    """Validate input and add a reward goal at the lowest priority.

    Returns:
        Exit code (0 = success, 1 = invalid input)
    """
    name = (title or "").strip()
    if not name:
        console.print("[red]Error:[/] Please enter a title for the reward.")
        return 1

    value = parse_positive_amount(goal)
    if value is None:
        console.print("[red]Error:[/] Please enter a valid positive goal amount.")
        return 1

    store = open_store(workspace)
    reward = store.add_reward(name, value)
    console.print(
        f"[green]Added reward[/] [bold]{reward.title}[/] "
        f"(goal {fmt_money(reward.goal_amount)}, priority {reward.priority})"
    )
    return 0
