"""Data models for scan findings: Severity, Confidence, Location, Finding.

These are the core data types produced by the detectors and consumed by the
host adapter and the CLI formatters. They are intentionally decoupled from the
scanner so that output code can import them without pulling in the pattern
tables or the walk logic.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# Severity / Confidence: closed ordinal scales
# ---------------------------------------------------------------------------


class Severity(IntEnum):
    """Three-level severity scale for findings.

    The integer encoding enables direct comparison: LOW < MEDIUM < HIGH.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class Confidence(IntEnum):
    """How certain a detector is that a finding is a true positive."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


# ---------------------------------------------------------------------------
# Rule identifiers
# ---------------------------------------------------------------------------

MISSING_ATTESTATION = "PROV-001"
INCOMPLETE_METADATA = "PROV-002"
REPRODUCIBILITY_RISK = "PROV-003"


@dataclass(frozen=True)
class RuleInfo:
    """Static description of one rule in the catalog.

    Attributes:
        rule_id: Stable identifier (e.g., "PROV-001").
        title: Short human-readable rule name.
        severity: Severity every finding of this rule carries.
        confidence: Confidence every finding of this rule carries.
        finding_type: Value of the ``type`` metadata key on findings.
    """

    rule_id: str
    title: str
    severity: Severity
    confidence: Confidence
    finding_type: str


RULES: Mapping[str, RuleInfo] = MappingProxyType({
    MISSING_ATTESTATION: RuleInfo(
        rule_id=MISSING_ATTESTATION,
        title="Missing SLSA attestation",
        severity=Severity.HIGH,
        confidence=Confidence.MEDIUM,
        finding_type="missing_attestation",
    ),
    INCOMPLETE_METADATA: RuleInfo(
        rule_id=INCOMPLETE_METADATA,
        title="Incomplete provenance metadata",
        severity=Severity.MEDIUM,
        confidence=Confidence.HIGH,
        finding_type="incomplete_metadata",
    ),
    REPRODUCIBILITY_RISK: RuleInfo(
        rule_id=REPRODUCIBILITY_RISK,
        title="Build reproducibility risk",
        severity=Severity.MEDIUM,
        confidence=Confidence.MEDIUM,
        finding_type="reproducibility_risk",
    ),
})


# ---------------------------------------------------------------------------
# Finding: A single detected issue
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Location:
    """Where a finding applies.

    Line numbers are 1-indexed; both are 0 for workspace-level and
    file-level findings.
    """

    path: str
    start_line: int = 0
    end_line: int = 0


@dataclass(frozen=True)
class Finding:
    """A single issue produced by one of the detectors.

    Findings are immutable (frozen) and their metadata is exposed through a
    read-only mapping, so nothing downstream can alter a finding once the
    scanner has emitted it.

    Attributes:
        rule_id: Rule identifier, one of the keys of ``RULES``.
        severity: Finding severity (LOW through HIGH).
        confidence: Detector confidence (LOW through HIGH).
        message: Human-readable description, possibly embedding a sub-reason.
        location: File (or workspace root) and line range.
        metadata: Free-form string annotations such as ``type`` and
            ``reasons``.
    """

    rule_id: str
    severity: Severity
    confidence: Confidence
    message: str
    location: Location
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_rule(
        cls,
        rule_id: str,
        message: str,
        location: Location,
        **metadata: str,
    ) -> Finding:
        """Build a finding carrying the catalog severity and confidence of *rule_id*."""
        info = RULES[rule_id]
        return cls(
            rule_id=rule_id,
            severity=info.severity,
            confidence=info.confidence,
            message=message,
            location=location,
            metadata={"type": info.finding_type, **metadata},
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.name,
            "confidence": self.confidence.name,
            "message": self.message,
            "location": {
                "path": self.location.path,
                "start_line": self.location.start_line,
                "end_line": self.location.end_line,
            },
            "metadata": dict(self.metadata),
        }


# ---------------------------------------------------------------------------
# ScanResult: Complete output of one workspace scan
# ---------------------------------------------------------------------------


@dataclass
class ScanResult:
    """The complete result of scanning a single workspace.

    Attributes:
        root: The workspace root that was scanned.
        findings: All findings in emission order (may be empty).
        files_scanned: Number of files visited by the walk.
        provenance_files: Number of files classified as provenance artifacts.
        build_files: Number of files classified as build or CI configuration.
    """

    root: str
    findings: list[Finding] = field(default_factory=list)
    files_scanned: int = 0
    provenance_files: int = 0
    build_files: int = 0

    @property
    def max_severity(self) -> Severity | None:
        """Return the highest severity among all findings, or None if clean."""
        if not self.findings:
            return None
        return max(f.severity for f in self.findings)

    def by_rule(self, rule_id: str) -> list[Finding]:
        """Return the findings produced by *rule_id*."""
        return [f for f in self.findings if f.rule_id == rule_id]
