"""Reproducibility rule set for build and CI configuration files."""

from attestguard.core.reproducibility.rules import (
    REPRODUCIBILITY_RULES,
    ReproducibilityRule,
    scan_file,
    scan_lines,
)

__all__ = [
    "REPRODUCIBILITY_RULES",
    "ReproducibilityRule",
    "scan_file",
    "scan_lines",
]
