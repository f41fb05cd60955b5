from __future__ import annotations

"""
List reward goals in priority order.

Positions shown here (1-based) are the ones delete-reward and deposit accept.
"""

from rich.table import Table

from piggy.workspace import Workspace

from .util import console, fmt_money, open_store


def run(*, workspace: Workspace) -> int:
    store = open_store(workspace)
    rewards = store.rewards

    if not rewards:
        console.print("[yellow]Create a reward goal to start depositing.[/]")
        return 0

    table = Table(title="Reward Goals")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Progress", justify="right")
    table.add_column("Goal", style="green", justify="right")
    table.add_column("%", style="magenta", justify="right")

    for pos, reward in enumerate(rewards, start=1):
        pct = reward.progress_amount / reward.goal_amount * 100 if reward.goal_amount else 0
        pct_str = f"[green bold]{pct:.0f}%[/]" if reward.is_complete else f"{pct:.0f}%"
        table.add_row(
            str(pos),
            reward.title,
            fmt_money(reward.progress_amount),
            fmt_money(reward.goal_amount),
            pct_str,
        )

    console.print(table)
    console.print(f"\n[bold]Available to deposit:[/] {fmt_money(store.current_balance())}")
    return 0
