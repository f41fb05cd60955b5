from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from piggy.cli.command.delete_reward import run
from piggy.cli.command.util import open_store
from piggy.workspace import Workspace


def it_should_delete_by_listed_position(tmp_path: Path):
    workspace = Workspace(root=tmp_path)
    store = open_store(workspace)
    for title in ["Bike", "Book", "Kite"]:
        store.add_reward(title, Decimal("10"))

    rc = run(positions=[1, 3], workspace=workspace)

    assert rc == 0
    assert [r.title for r in open_store(workspace).rewards] == ["Book"]


def it_should_refuse_out_of_range_positions_without_deleting(tmp_path: Path):
    workspace = Workspace(root=tmp_path)
    open_store(workspace).add_reward("Bike", Decimal("10"))

    rc = run(positions=[1, 2], workspace=workspace)

    assert rc == 1
    assert len(open_store(workspace).rewards) == 1
