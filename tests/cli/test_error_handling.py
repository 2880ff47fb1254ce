"""Tests for CLI error handling edge cases.

Verifies graceful handling of:
    - Non-existent paths.
    - File paths where a directory is expected.
    - A missing configuration file.
    - Cancelled scans.
    - Restoring the SIGINT handler after a scan.
"""

from __future__ import annotations

import signal
from pathlib import Path

import pytest
from click.testing import CliRunner

from attestguard.cli import scan as scan_module
from attestguard.cli.main import cli
from attestguard.core.scanner import ScanConfig
from attestguard.exceptions import ScanCancelled


class TestScanErrorHandling:

    def test_nonexistent_path(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["scan", "/nonexistent/path/xyz"])
        # Click's exists=True on the Path argument catches this before our code.
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_file_instead_of_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "Makefile"
        target.write_text("all:\n")
        result = runner.invoke(cli, ["scan", str(target)])
        assert result.exit_code == 2

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["scan", str(tmp_path), "--config", str(tmp_path / "nope.yml")]
        )
        assert result.exit_code == 2

    def test_cancelled_scan_exits_130(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _cancelled(path: str, config: object) -> None:
            raise ScanCancelled("workspace scan cancelled")

        monkeypatch.setattr(scan_module, "_run_scan", _cancelled)
        result = runner.invoke(cli, ["scan", str(tmp_path)])
        assert result.exit_code == 130


class TestSigintHandler:
    """The SIGINT handler installed for a scan is always removed afterwards."""

    def _record_signal_calls(
        self, monkeypatch: pytest.MonkeyPatch, previous: object
    ) -> list[tuple[int, object]]:
        calls: list[tuple[int, object]] = []

        def fake_signal(signum: int, handler: object) -> object:
            calls.append((signum, handler))
            return previous

        monkeypatch.setattr(scan_module.signal, "signal", fake_signal)
        return calls

    def test_previous_python_handler_restored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def handler(signum: int, frame: object) -> None:
            pass

        calls = self._record_signal_calls(monkeypatch, handler)
        scan_module._run_scan(str(tmp_path), ScanConfig())
        assert calls[-1] == (signal.SIGINT, handler)

    def test_foreign_handler_falls_back_to_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # signal.signal returns None when the old handler was not set from Python.
        calls = self._record_signal_calls(monkeypatch, None)
        scan_module._run_scan(str(tmp_path), ScanConfig())
        assert len(calls) == 2
        assert calls[-1] == (signal.SIGINT, signal.default_int_handler)
