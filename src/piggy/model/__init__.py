from .ledger import (
    LedgerState,
    RewardGoal,
    Transaction,
    TransactionCategory,
    TransactionKind,
    sort_by_priority,
)

__all__ = [
    # models
    "LedgerState",
    "RewardGoal",
    "Transaction",
    # enums
    "TransactionCategory",
    "TransactionKind",
    # helpers
    "sort_by_priority",
]
