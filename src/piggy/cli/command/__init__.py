from __future__ import annotations

# Command implementations for the piggy CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. Typer wrappers in piggy.cli.app delegate here.

__all__ = [
    "init",
    "balance",
    "allowance",
    "add",
    "history",
    "spending",
    "delete_tx",
    "clear",
    "rewards",
    "add_reward",
    "delete_reward",
    "deposit",
]
