"""Workspace walk and rule dispatch.

This module implements the ``WorkspaceScanner`` class which drives one scan:

1. **Walk** -- depth-first traversal of the workspace, pruning skipped
   directories and never following directory symlinks.
2. **Dispatch** -- each file is classified; provenance artifacts go to the
   validator (PROV-002), build and CI configuration goes to the
   reproducibility rules (PROV-003).
3. **Workspace rule** -- once the walk is done, a workspace that describes a
   build but carries no provenance artifact gets one PROV-001 finding.

Per-file and per-directory I/O errors are logged and skipped. Cancellation is
checked at every file and directory boundary and surfaces as
``ScanCancelled``; no partial result is returned in that case.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from attestguard.core.classifier import FileKind
from attestguard.core.findings import (
    INCOMPLETE_METADATA,
    MISSING_ATTESTATION,
    REPRODUCIBILITY_RISK,
    Finding,
    FindingsCollector,
    FindingsSink,
    Location,
    ScanResult,
)
from attestguard.core.provenance import validate_file
from attestguard.core.reproducibility import scan_file
from attestguard.core.scanner.cancellation import CancellationToken
from attestguard.core.scanner.config import DEFAULT_CONFIG, ScanConfig

logger = logging.getLogger(__name__)

MISSING_ATTESTATION_MESSAGE = (
    "No SLSA attestation or provenance files found in workspace "
    "with build configuration"
)


@dataclass
class _ScanState:
    """Mutable state owned by exactly one ``scan`` call."""

    has_provenance: bool = False
    has_build_config: bool = False
    files_scanned: int = 0
    provenance_files: int = 0
    build_files: int = 0


class WorkspaceScanner:
    """Scans a workspace for provenance and build reproducibility issues.

    The scanner holds only immutable configuration; all per-scan state lives
    in the ``scan()`` call. One instance can serve concurrent scans.

    Usage::

        scanner = WorkspaceScanner()
        for finding in scanner.scan("/path/to/repo"):
            print(f"[{finding.severity.name}] {finding.rule_id} {finding.message}")
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def scan(
        self,
        root: str | os.PathLike[str],
        sink: FindingsSink | None = None,
        token: CancellationToken | None = None,
    ) -> list[Finding]:
        """Scan a workspace and return its findings.

        Args:
            root: Workspace root directory. An empty string yields no findings.
            sink: Destination for findings as they are emitted. Defaults to a
                fresh ``FindingsCollector``.
            token: Optional cancellation token.

        Returns:
            The findings accumulated by this scan, in emission order. When a
            custom sink is supplied, the findings this scan added to it.

        Raises:
            ScanCancelled: The token was cancelled during the walk.
        """
        return self.scan_detailed(root, sink=sink, token=token).findings

    def scan_detailed(
        self,
        root: str | os.PathLike[str],
        sink: FindingsSink | None = None,
        token: CancellationToken | None = None,
    ) -> ScanResult:
        """Like ``scan()``, but also reports walk counters in a ``ScanResult``."""
        root_str = os.fspath(root)
        collector = FindingsCollector()
        result = ScanResult(root=root_str)

        if not root_str:
            return result

        root_path = Path(root_str)
        try:
            is_dir = root_path.is_dir()
        except OSError:
            is_dir = False
        if not is_dir:
            logger.warning("Workspace root is not a directory, nothing to scan: %s", root_str)
            return result

        token = token or CancellationToken()
        state = _ScanState()

        def emit(finding: Finding) -> None:
            collector.add(finding)
            if sink is not None:
                sink.add(finding)

        for path in self._walk(root_path, token):
            self._scan_file(path, root_path, state, emit)

        if state.has_build_config and not state.has_provenance:
            emit(Finding.from_rule(
                MISSING_ATTESTATION,
                MISSING_ATTESTATION_MESSAGE,
                Location(root_str, 0, 0),
            ))

        result.findings = collector.findings
        result.files_scanned = state.files_scanned
        result.provenance_files = state.provenance_files
        result.build_files = state.build_files
        logger.debug(
            "Scanned %d files under %s: %d provenance, %d build, %d findings",
            state.files_scanned, root_str, state.provenance_files,
            state.build_files, len(result.findings),
        )
        return result

    # -- Walk --

    def _walk(self, root: Path, token: CancellationToken) -> Iterator[Path]:
        """Yield every regular file under *root*, depth-first.

        The walk keeps an explicit stack of sibling iterators, so nesting
        depth is not bounded by the interpreter's recursion limit. Sibling
        order is sorted for stable output but is not a contract.
        """
        stack: list[Iterator[Path]] = []
        children = self._list_directory(root, token)
        if children is not None:
            stack.append(children)

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            token.raise_if_cancelled()
            try:
                is_dir = entry.is_dir()
                is_link = entry.is_symlink()
                is_file = entry.is_file()
            except OSError:
                continue
            if is_dir and is_link:
                logger.debug("Not following directory symlink: %s", entry)
            elif is_dir:
                children = self._list_directory(entry, token)
                if children is not None:
                    stack.append(children)
            elif is_file:
                yield entry

    def _list_directory(
        self, directory: Path, token: CancellationToken
    ) -> Iterator[Path] | None:
        """Return an iterator over the sorted entries of *directory*.

        Returns None for skipped and unreadable directories.
        """
        token.raise_if_cancelled()
        if directory.name in self.config.skipped_dirs:
            logger.debug("Skipping directory: %s", directory)
            return None
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            logger.warning("Cannot read directory %s: %s", directory, exc)
            return None
        return iter(entries)

    # -- Dispatch --

    def _scan_file(
        self,
        path: Path,
        root: Path,
        state: _ScanState,
        emit: Callable[[Finding], None],
    ) -> None:
        state.files_scanned += 1
        relative = path.relative_to(root).as_posix()
        kind = self.config.classifier.classify(path.name, relative)

        if kind is FileKind.PROVENANCE:
            state.has_provenance = True
            state.provenance_files += 1
            reasons = validate_file(path)
            if reasons:
                joined = ", ".join(reasons)
                emit(Finding.from_rule(
                    INCOMPLETE_METADATA,
                    f"Incomplete provenance metadata: {joined}",
                    Location(str(path), 0, 0),
                    reasons=joined,
                ))
        elif kind is not None and kind.is_build_describing:
            state.has_build_config = True
            state.build_files += 1
            for line_number, reason in scan_file(path, self.config.rules):
                emit(Finding.from_rule(
                    REPRODUCIBILITY_RISK,
                    f"Build reproducibility risk: {reason}",
                    Location(str(path), line_number, line_number),
                    reason=reason,
                ))


def scan_workspace(
    root: str | os.PathLike[str],
    config: ScanConfig | None = None,
    sink: FindingsSink | None = None,
    token: CancellationToken | None = None,
) -> list[Finding]:
    """Scan *root* with a fresh ``WorkspaceScanner``. See ``WorkspaceScanner.scan``."""
    return WorkspaceScanner(config).scan(root, sink=sink, token=token)
