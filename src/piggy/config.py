"""
Central configuration for the piggy ledger.

Path resolution lives in piggy.workspace.Workspace:
  1. Explicit --data-dir CLI option
  2. PIGGY_DATA environment variable
  3. Current working directory
"""

import logging
import os

# Keys written to the key-value store, one blob per key.
KEY_TRANSACTIONS = "transactions"
KEY_REWARDS = "rewards"
KEY_ALLOWANCE = "allowance"
KEY_LAST_RESET_DATE = "lastResetDate"

LEDGER_KEYS = (KEY_TRANSACTIONS, KEY_REWARDS, KEY_ALLOWANCE, KEY_LAST_RESET_DATE)

DATA_ENV_VAR = "PIGGY_DATA"
LOG_LEVEL_ENV_VAR = "PIGGY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs.

    --verbose wins; otherwise PIGGY_LOG_LEVEL, otherwise WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
