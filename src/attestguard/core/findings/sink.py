"""Findings sinks: where the scanner delivers the findings it emits.

The scanner never returns findings from inside the walk; it appends them to a
``FindingsSink`` as they are detected. Hosts that stream results can provide
their own sink, everyone else gets the list-backed ``FindingsCollector``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from attestguard.core.findings.models import Finding


class FindingsSink(ABC):
    """Append-only destination for findings."""

    @abstractmethod
    def add(self, finding: Finding) -> None:
        """Record one finding. Must not drop or reorder earlier findings."""


class FindingsCollector(FindingsSink):
    """Default sink that accumulates findings in insertion order.

    Usage::

        sink = FindingsCollector()
        WorkspaceScanner().scan("/path/to/repo", sink=sink)
        for finding in sink.findings:
            print(finding.rule_id, finding.message)
    """

    def __init__(self) -> None:
        self._findings: list[Finding] = []

    def add(self, finding: Finding) -> None:
        self._findings.append(finding)

    @property
    def findings(self) -> list[Finding]:
        """A copy of the accumulated findings."""
        return list(self._findings)

    def __len__(self) -> int:
        return len(self._findings)
