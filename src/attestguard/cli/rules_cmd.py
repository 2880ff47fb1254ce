"""``attestguard rules`` -- List the rule catalog and reproducibility checks.

Prints a plain table of the three rules with their severity and confidence,
followed by every line check PROV-003 applies to build and CI files.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from attestguard import __version__
from attestguard.core.findings import RULES
from attestguard.core.reproducibility import REPRODUCIBILITY_RULES

# Column widths for alignment
_W_ID = 8
_W_TITLE = 30
_W_SEV = 8
_W_CONF = 10

_ROW_FMT = "{rid:<{wi}}  {title:<{wt}}  {sev:<{ws}}  {conf:<{wc}}"


def _format_row(rid: str, title: str, sev: str, conf: str) -> str:
    """Render a single table row, right-stripped for clean output."""
    return _ROW_FMT.format(
        rid=rid, title=title, sev=sev, conf=conf,
        wi=_W_ID, wt=_W_TITLE, ws=_W_SEV, wc=_W_CONF,
    ).rstrip()


def format_rules_table() -> str:
    """Build the rule catalog as a plain string.

    Returns:
        Multi-line string ready for terminal output.  Never raises.
    """
    lines: list[str] = []
    lines.append(f"AttestGuard v{__version__} -- {len(RULES)} Rules")
    lines.append("")
    lines.append(_format_row("Rule", "Title", "Severity", "Confidence"))
    lines.append(_format_row("-" * _W_ID, "-" * _W_TITLE, "-" * _W_SEV, "-" * _W_CONF))

    for info in RULES.values():
        lines.append(_format_row(
            info.rule_id, info.title, info.severity.name, info.confidence.name,
        ))

    lines.append("")
    lines.append("Reproducibility checks (PROV-003):")
    # Several patterns share one reason; list each reason once.
    for reason in dict.fromkeys(rule.reason for rule in REPRODUCIBILITY_RULES):
        lines.append(f"  - {reason}")

    lines.append("")
    lines.append("  Run: attestguard scan <path> to audit a workspace.")
    return "\n".join(lines)


@click.command("rules")
def rules_command() -> None:
    """List the provenance rules and reproducibility checks."""
    click.echo(format_rules_table())
