"""Line-pattern detectors for non-reproducible build steps.

Each ``ReproducibilityRule`` pairs a compiled, case-insensitive regex with the
reason surfaced verbatim in PROV-003 findings. Word boundaries and whitespace
classes are ASCII-only. Every physical line is tested against every rule, so
one line can yield several hits. Lines end at a newline only; a lone carriage
return is line content.

The catalog covers the usual sources of build drift:

- Remote scripts piped straight into a shell (content can change at any time).
- Package installs without a version pin.
- Floating ``latest`` tags.
- Timestamps and random values baked into build output.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReproducibilityRule:
    """A single line detector.

    Attributes:
        pattern: Compiled regex searched anywhere in the line.
        reason: Fixed human-readable explanation of the risk.
    """

    pattern: re.Pattern[str]
    reason: str

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


_PIPE_TO_SHELL = "Piping remote script to shell is non-reproducible"

REPRODUCIBILITY_RULES: tuple[ReproducibilityRule, ...] = (
    ReproducibilityRule(
        re.compile(r"\bcurl\b.*\|\s*(sh|bash)\b", re.IGNORECASE | re.ASCII),
        _PIPE_TO_SHELL,
    ),
    ReproducibilityRule(
        re.compile(r"\bwget\b.*\|\s*(sh|bash)\b", re.IGNORECASE | re.ASCII),
        _PIPE_TO_SHELL,
    ),
    # Only a bare package name ending the line counts; "pkg=1.2" or a
    # trailing flag is treated as pinned or out of scope.
    ReproducibilityRule(
        re.compile(
            r"\b(apt-get|apk|yum)\s+install\s+[a-zA-Z][a-zA-Z0-9._-]*\s*$",
            re.IGNORECASE | re.ASCII,
        ),
        "Package install without version pinning",
    ),
    ReproducibilityRule(
        re.compile(r"\blatest\b", re.IGNORECASE | re.ASCII),
        "Using 'latest' tag is non-deterministic",
    ),
    ReproducibilityRule(
        re.compile(r"\bDATE\b|\bdate\s*\(", re.IGNORECASE | re.ASCII),
        "Embedding build date makes output non-reproducible",
    ),
    ReproducibilityRule(
        re.compile(r"\bRANDOM\b|\brand\(", re.IGNORECASE | re.ASCII),
        "Random values in build produce non-deterministic output",
    ),
)


def scan_lines(
    lines: Iterable[str],
    rules: Sequence[ReproducibilityRule] = REPRODUCIBILITY_RULES,
) -> list[tuple[int, str]]:
    """Test every line against every rule.

    Args:
        lines: Physical lines of a build file, without line terminators.
        rules: Detectors to apply, in reporting order.

    Returns:
        ``(line_number, reason)`` pairs with 1-indexed line numbers, in line
        order and then rule order.
    """
    hits: list[tuple[int, str]] = []
    for line_number, line in enumerate(lines, start=1):
        for rule in rules:
            if rule.matches(line):
                hits.append((line_number, rule.reason))
    return hits


def _physical_lines(text: str) -> list[str]:
    """Split on newlines only, dropping one trailing carriage return per line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def scan_file(
    path: Path,
    rules: Sequence[ReproducibilityRule] = REPRODUCIBILITY_RULES,
) -> list[tuple[int, str]]:
    """Scan a build file on disk.

    Undecodable bytes are replaced rather than rejected. A file that cannot be
    read produces no hits; the error is logged and never raised.
    """
    try:
        with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
            return scan_lines(_physical_lines(handle.read()), rules)
    except OSError as exc:
        logger.warning("Cannot read build file %s: %s", path, exc)
        return []
