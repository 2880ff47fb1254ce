"""``attestguard scan [path]`` -- Audit a workspace for provenance issues.

Exit Codes:
    0 -- No findings at or above the severity threshold.
    1 -- One or more findings at or above the severity threshold.
    2 -- Usage or configuration error.
    130 -- Scan interrupted.
"""

from __future__ import annotations

import json
import signal
import sys
import threading
from pathlib import Path

import click

from attestguard.core.findings import ScanResult, Severity
from attestguard.core.scanner import CancellationToken, ScanConfig, WorkspaceScanner, load_config
from attestguard.exceptions import ConfigError, ScanCancelled

# Severity threshold mapping (string -> IntEnum)
_SEVERITY_MAP: dict[str, Severity] = {
    "low": Severity.LOW,
    "medium": Severity.MEDIUM,
    "high": Severity.HIGH,
}


def _filter_result(result: ScanResult, threshold: Severity) -> ScanResult:
    """Return a copy of *result* keeping only findings at or above *threshold*."""
    return ScanResult(
        root=result.root,
        findings=[f for f in result.findings if f.severity >= threshold],
        files_scanned=result.files_scanned,
        provenance_files=result.provenance_files,
        build_files=result.build_files,
    )


def _result_to_json(result: ScanResult) -> dict:
    """Convert a scan result to a JSON-serializable dict."""
    return {
        "workspace_root": result.root,
        "files_scanned": result.files_scanned,
        "provenance_files": result.provenance_files,
        "build_files": result.build_files,
        "findings_count": len(result.findings),
        "max_severity": result.max_severity.name if result.max_severity else None,
        "findings": [f.to_dict() for f in result.findings],
    }


def _run_scan(path: str, config: ScanConfig) -> ScanResult:
    """Run one scan with SIGINT wired to the cancellation token."""
    token = CancellationToken()
    scanner = WorkspaceScanner(config)
    # Signal handlers can only be installed from the main thread.
    if threading.current_thread() is not threading.main_thread():
        return scanner.scan_detailed(path, token=token)

    previous = signal.signal(signal.SIGINT, lambda signum, frame: token.cancel())
    try:
        return scanner.scan_detailed(path, token=token)
    finally:
        # None means the previous handler was not installed from Python.
        signal.signal(
            signal.SIGINT,
            previous if previous is not None else signal.default_int_handler,
        )


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False),
    required=False,
    default=".",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--severity-threshold",
    type=click.Choice(["low", "medium", "high"]),
    default="low",
    help="Minimum severity to report (default: low).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file extending the built-in pattern tables.",
)
def scan_command(
    path: str,
    output_format: str,
    severity_threshold: str,
    config_path: Path | None,
) -> None:
    """Scan a workspace for missing or incomplete SLSA provenance.

    Walks PATH (default: the current directory), validates in-toto
    attestation files, and checks build and CI configuration for
    non-reproducible steps.

    Exit code 0 if nothing at or above the threshold was found, 1 otherwise.
    """
    try:
        config = load_config(config_path) if config_path else ScanConfig()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        result = _run_scan(path, config)
    except ScanCancelled:
        click.echo("Scan interrupted.", err=True)
        sys.exit(130)

    result = _filter_result(result, _SEVERITY_MAP[severity_threshold])

    if output_format == "json":
        click.echo(json.dumps(_result_to_json(result), indent=2))
    else:
        from attestguard.cli.output import print_scan_result
        print_scan_result(result)

    sys.exit(1 if result.findings else 0)
