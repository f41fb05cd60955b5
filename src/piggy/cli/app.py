from __future__ import annotations

"""
Piggy CLI Wrapper (Typer + Rich)

Local-only allowance ledger with reward goals.

All paths are resolved from a single workspace root:
  --data-dir / PIGGY_DATA env var / current working directory
"""

from pathlib import Path
from typing import List, Optional

import typer

from piggy.config import DATA_ENV_VAR, configure_logging
from piggy.model.ledger import TransactionCategory, TransactionKind
from piggy.workspace import Workspace

APP_HELP = "Piggy CLI (local-only allowance ledger)"
HELP_DATE = "Transaction date, ISO format (default: now)"
HELP_POSITION = "Reward position as shown by 'piggy rewards' (1 = top priority)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=DATA_ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Piggy CLI: all paths resolved from a single workspace root."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with an empty ledger database.

    Safe to run on an existing workspace; existing data is kept.

    Examples:
      piggy --data-dir ~/allowance init
      piggy init
    """
    from piggy.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def balance(ctx: typer.Context):
    """Show the current balance, allowance and projected savings."""
    from piggy.cli.command import balance as cmd_balance

    code = cmd_balance.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def allowance(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="New allowance amount"),
):
    """Set the base allowance.

    Examples:
      piggy allowance 50
    """
    from piggy.cli.command import allowance as cmd_allowance

    code = cmd_allowance.run(amount=amount, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command("add-income")
def add_income(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Positive amount"),
    reason: str = typer.Argument(..., help="What the money was for"),
    date: Optional[str] = typer.Option(None, "--date", "-d", help=HELP_DATE),
):
    """Record income. Income is always filed under Reward Deposit.

    Examples:
      piggy add-income 20 "Chores"
    """
    from piggy.cli.command import add as cmd_add

    code = cmd_add.run(
        kind=TransactionKind.income,
        amount=amount,
        reason=reason,
        date=date,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command("add-expense")
def add_expense(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Positive amount"),
    reason: str = typer.Argument(..., help="What the money was spent on"),
    category: TransactionCategory = typer.Option(
        TransactionCategory.misc, "--category", "-c", case_sensitive=False, help="Expense category"
    ),
    date: Optional[str] = typer.Option(None, "--date", "-d", help=HELP_DATE),
):
    """Record an expense.

    Examples:
      piggy add-expense 4.50 "Ice cream" --category Food
    """
    from piggy.cli.command import add as cmd_add

    code = cmd_add.run(
        kind=TransactionKind.expense,
        amount=amount,
        reason=reason,
        category=category,
        date=date,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def history(
    ctx: typer.Context,
    limit: int = typer.Option(5, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """Show recent transactions with the running balance."""
    from piggy.cli.command import history as cmd_history

    code = cmd_history.run(limit=limit, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def spending(ctx: typer.Context):
    """Show expense totals by category."""
    from piggy.cli.command import spending as cmd_spending

    code = cmd_spending.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command("delete-tx")
def delete_tx(
    ctx: typer.Context,
    txid: str = typer.Option(..., "--txid", "-t", help="Transaction id prefix (8+ chars)"),
    write: bool = typer.Option(False, "--write", help="Persist changes (default: dry-run)"),
):
    """Delete one transaction by id prefix.

    Safety: dry-run by default. Use --write to persist changes.
    """
    from piggy.cli.command import delete_tx as cmd_delete_tx

    code = cmd_delete_tx.run(txid=txid, workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


@app.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", help="Confirm clearing every transaction"),
):
    """Delete all transactions (irreversible)."""
    from piggy.cli.command import clear as cmd_clear

    code = cmd_clear.run(workspace=_ws(ctx), yes=yes)
    raise typer.Exit(code=code)


@app.command()
def rewards(ctx: typer.Context):
    """List reward goals in priority order."""
    from piggy.cli.command import rewards as cmd_rewards

    code = cmd_rewards.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command("add-reward")
def add_reward(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Reward title"),
    goal: str = typer.Argument(..., help="Goal amount"),
):
    """Create a reward goal.

    Examples:
      piggy add-reward "New bike" 200
    """
    from piggy.cli.command import add_reward as cmd_add_reward

    code = cmd_add_reward.run(title=title, goal=goal, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command("delete-reward")
def delete_reward(
    ctx: typer.Context,
    positions: List[int] = typer.Argument(..., help=HELP_POSITION),
):
    """Delete reward goals by list position.

    Examples:
      piggy delete-reward 1 3
    """
    from piggy.cli.command import delete_reward as cmd_delete_reward

    code = cmd_delete_reward.run(positions=positions, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def deposit(
    ctx: typer.Context,
    position: int = typer.Argument(..., help=HELP_POSITION),
    amount: str = typer.Argument(..., help="Amount to move from the balance"),
):
    """Move funds from the balance into a reward goal.

    Examples:
      piggy deposit 1 25
    """
    from piggy.cli.command import deposit as cmd_deposit

    code = cmd_deposit.run(position=position, amount=amount, workspace=_ws(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
