from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from rich.console import Console
from rich.text import Text

from piggy.services.ledger_store import LedgerStore
from piggy.storage import LedgerRepository, SqliteKeyValueStore
from piggy.workspace import Workspace

console = Console()


def open_store(workspace: Workspace) -> LedgerStore:
    """LedgerStore backed by the workspace's SQLite ledger database."""
    kv = SqliteKeyValueStore(workspace.ledger_db_path)
    return LedgerStore(LedgerRepository(kv))


def parse_positive_amount(text: str) -> Optional[Decimal]:
    """Parse a user-entered amount; None unless it is a finite number > 0."""
    try:
        value = Decimal((text or "").strip().replace("$", "").replace(",", ""))
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


def parse_amount(text: str) -> Optional[Decimal]:
    """Parse any finite amount, including zero and negatives."""
    try:
        value = Decimal((text or "").strip().replace("$", "").replace(",", ""))
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def parse_date(text: Optional[str]) -> Optional[datetime]:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError:
        return None


def fmt_money(amt: Decimal) -> str:
    if amt < 0:
        return f"-${abs(amt):,.2f}"
    return f"${amt:,.2f}"


def fmt_amount(amt: Decimal) -> Text:
    s = fmt_money(amt)
    if amt < 0:
        return Text(s, style="bold red")
    elif amt > 0:
        return Text(s, style="bold green")
    return Text(s)
