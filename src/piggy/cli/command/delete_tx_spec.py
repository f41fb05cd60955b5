from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from piggy.cli.command.delete_tx import run
from piggy.cli.command.util import open_store
from piggy.model.ledger import TransactionKind
from piggy.workspace import Workspace


def it_should_be_dry_run_by_default_and_delete_with_write(tmp_path: Path):
    workspace = Workspace(root=tmp_path)
    txn = open_store(workspace).add_transaction(Decimal("7"), "Toy", TransactionKind.expense)

    assert run(txid=txn.id[:8], workspace=workspace) == 0
    assert len(open_store(workspace).transactions) == 1

    assert run(txid=txn.id[:8].upper(), workspace=workspace, write=True) == 0
    assert open_store(workspace).transactions == []


def it_should_reject_short_or_unknown_prefixes(tmp_path: Path):
    workspace = Workspace(root=tmp_path)
    open_store(workspace).add_transaction(Decimal("7"), "Toy", TransactionKind.expense)

    assert run(txid="abc", workspace=workspace, write=True) == 1
    assert run(txid="zzzzzzzz", workspace=workspace, write=True) == 1
    assert len(open_store(workspace).transactions) == 1
