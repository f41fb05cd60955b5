from __future__ import annotations

"""
Record income or expense transactions.

The ledger accepts whatever it is given, so the checks on user input live
here: amount must be a positive number, reason must not be blank, and income
is always filed under Reward Deposit.
"""

from typing import Optional

from piggy.model.ledger import TransactionCategory, TransactionKind
from piggy.workspace import Workspace

from .util import console, fmt_money, open_store, parse_date, parse_positive_amount


def run(
    *,
    kind: TransactionKind,
    amount: str,
    reason: str,
    category: Optional[TransactionCategory] = None,
    date: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Validate input and add one transaction.

    Args:
        kind: Income or expense
        amount: Amount text as entered by the user
        reason: Free-text label
        category: Expense category (ignored for income)
        date: Optional ISO date/datetime; defaults to now
        workspace: Workspace holding the ledger

    Returns:
        Exit code (0 = success, 1 = invalid input)
    """
    value = parse_positive_amount(amount)
    if value is None:
        console.print("[red]Error:[/] Please enter a valid positive amount.")
        return 1

    label = (reason or "").strip()
    if not label:
        console.print("[red]Error:[/] Reason cannot be empty.")
        return 1

    when = parse_date(date)
    if date and when is None:
        console.print(f"[red]Error:[/] '{date}' is not an ISO date (YYYY-MM-DD)")
        return 1

    if kind == TransactionKind.income:
        final_category = TransactionCategory.reward_deposit
    else:
        final_category = category or TransactionCategory.misc

    store = open_store(workspace)
    txn = store.add_transaction(value, label, kind, final_category, date=when)

    sign = "+" if kind == TransactionKind.income else "-"
    console.print(
        f"[green]Recorded[/] {kind.value} {sign}{fmt_money(value)} "
        f"[dim]({final_category.value}, id={txn.id[:8]})[/]"
    )
    console.print(f"[bold]Current Balance:[/] {fmt_money(store.current_balance())}")
    return 0
