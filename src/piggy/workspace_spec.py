from __future__ import annotations

from pathlib import Path

from piggy.workspace import LEDGER_DB_NAME, Workspace


class DescribeWorkspace:
    class DescribeResolve:
        def it_should_prefer_the_data_dir_option_over_the_environment(self, monkeypatch):
            monkeypatch.setenv("PIGGY_DATA", "/tmp/env-allowance")
            ws = Workspace.resolve(explicit=Path("/tmp/explicit"))
            assert ws.root == Path("/tmp/explicit")

        def it_should_read_piggy_data_when_no_option_given(self, monkeypatch):
            monkeypatch.setenv("PIGGY_DATA", "/tmp/env-allowance")
            assert Workspace.resolve().root == Path("/tmp/env-allowance")

        def it_should_expand_home_in_either_source(self, monkeypatch, tmp_path):
            monkeypatch.setenv("HOME", str(tmp_path))
            monkeypatch.setenv("PIGGY_DATA", "~/piggy")
            assert Workspace.resolve().root == tmp_path / "piggy"
            assert Workspace.resolve(explicit=Path("~/kid")).root == tmp_path / "kid"

        def it_should_ignore_an_empty_environment_value(self, monkeypatch):
            monkeypatch.setenv("PIGGY_DATA", "")
            assert Workspace.resolve().root == Path.cwd()

    class DescribeLedgerLocation:
        def it_should_keep_the_ledger_under_data(self):
            ws = Workspace(root=Path("/home/kid"))
            assert ws.ledger_db_path == Path("/home/kid/data") / LEDGER_DB_NAME

        def it_should_report_a_missing_ledger(self, tmp_path):
            ws = Workspace(root=tmp_path)
            assert not ws.has_ledger

        def it_should_create_the_data_dir_idempotently(self, tmp_path):
            ws = Workspace(root=tmp_path / "fresh")
            assert ws.ensure_data_dir() == ws.data_dir
            assert ws.ensure_data_dir().is_dir()
            assert not ws.has_ledger

        def it_should_not_treat_a_directory_as_a_ledger(self, tmp_path):
            ws = Workspace(root=tmp_path)
            ws.ledger_db_path.mkdir(parents=True)
            assert not ws.has_ledger
