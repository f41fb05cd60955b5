"""
Workspace - where a piggy ledger lives on disk.

The workspace root holds a ``data/`` directory with a single SQLite file,
``ledger.db``. Roots are taken from ``--data-dir``, then PIGGY_DATA, then
the current directory; ``~`` is expanded in the first two.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from piggy.config import DATA_ENV_VAR

LEDGER_DB_NAME = "ledger.db"


@dataclass
class Workspace:
    """Root directory of one allowance ledger."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        if explicit is not None:
            return cls(root=Path(explicit).expanduser())
        env = os.environ.get(DATA_ENV_VAR)
        if env:
            return cls(root=Path(env).expanduser())
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def ledger_db_path(self) -> Path:
        return self.data_dir / LEDGER_DB_NAME

    @property
    def has_ledger(self) -> bool:
        """True once a ledger database file exists in this workspace."""
        return self.ledger_db_path.is_file()

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed and return it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir


__all__ = ["Workspace", "LEDGER_DB_NAME"]
