"""Rich output formatting helpers for the AttestGuard CLI.

Severity Color Mapping:
    HIGH = bold red, MEDIUM = yellow, LOW = cyan
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from attestguard.core.findings import Finding, ScanResult, Severity

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}

console = Console()


def severity_style(severity: Severity) -> str:
    """Return the Rich style string for a given severity level."""
    return _SEVERITY_STYLES.get(severity, "white")


def _location_str(finding: Finding) -> str:
    loc = finding.location
    if loc.start_line:
        return f"{loc.path}:{loc.start_line}"
    return loc.path


def print_scan_result(result: ScanResult) -> None:
    """Print a findings table followed by a one-line summary.

    Args:
        result: The (threshold-filtered) result of one workspace scan.
    """
    if not result.findings:
        console.print("[green]No provenance findings.[/green]")
    else:
        table = Table(title="AttestGuard Scan Results", show_header=True, header_style="bold")
        table.add_column("Rule", style="bold")
        table.add_column("Severity", justify="center")
        table.add_column("Confidence", justify="center", style="dim")
        table.add_column("Location")
        table.add_column("Message")

        for f in result.findings:
            table.add_row(
                f.rule_id,
                Text(f.severity.name, style=severity_style(f.severity)),
                f.confidence.name,
                _location_str(f),
                f.message,
            )
        console.print(table)

    _print_scan_summary(result)


def _print_scan_summary(result: ScanResult) -> None:
    """Print a one-line summary after the results table."""
    parts = [
        f"[bold]{result.files_scanned}[/bold] files scanned",
        f"{result.provenance_files} provenance",
        f"{result.build_files} build/CI",
    ]
    if result.findings:
        parts.append(f"[red]{len(result.findings)} findings[/red]")
    else:
        parts.append("[green]0 findings[/green]")
    console.print(" | ".join(parts))
