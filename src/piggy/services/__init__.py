"""
Service layer for the piggy ledger.

Functional core separated from the CLI shell. Services take their
dependencies through constructors and return data structures.

Principles:
- No UI framework imports (Rich, Typer)
- Business-rule failures are returned, not raised
"""

from piggy.services.ledger_store import DepositOutcome, LedgerStore
from piggy.services.summary_service import HistoryEntry, SummaryService

__all__ = [
    "LedgerStore",
    "DepositOutcome",
    "SummaryService",
    "HistoryEntry",
]
