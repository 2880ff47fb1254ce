"""Tests for ``attestguard rules``."""

from __future__ import annotations

from click.testing import CliRunner

from attestguard.cli.main import cli
from attestguard.cli.rules_cmd import format_rules_table


def test_rules_command_lists_catalog(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["rules"])
    assert result.exit_code == 0
    for rule_id in ("PROV-001", "PROV-002", "PROV-003"):
        assert rule_id in result.output


def test_reasons_listed_once() -> None:
    table = format_rules_table()
    assert table.count("Piping remote script to shell is non-reproducible") == 1
    assert "Package install without version pinning" in table
