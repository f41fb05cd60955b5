"""Local allowance ledger with reward-goal funding."""

__version__ = "0.1.0"
