"""File classification: provenance artifact, build config, CI config, or nothing.

Classification is a pure function of a file's name and its path relative to
the workspace root; the file is never opened. Provenance matching wins over
build/CI matching, so a file lands in at most one category.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from fnmatch import fnmatchcase
from pathlib import PurePosixPath

from attestguard.core.classifier.patterns import (
    BUILD_CONFIG_FILES,
    CI_CONFIG_PATTERNS,
    PROVENANCE_FILE_PATTERNS,
)


class FileKind(Enum):
    """Category of a workspace file relevant to provenance auditing."""

    PROVENANCE = "provenance"
    BUILD_CONFIG = "build_config"
    CI_CONFIG = "ci_config"

    @property
    def is_build_describing(self) -> bool:
        """True for build and CI configuration, which share one dispatch path."""
        return self in (FileKind.BUILD_CONFIG, FileKind.CI_CONFIG)


def _match_anchored(relative_path: str, pattern: str) -> bool:
    """Match a POSIX relative path against a root-anchored glob, segment by segment."""
    path_parts = PurePosixPath(relative_path).parts
    pattern_parts = PurePosixPath(pattern).parts
    if len(path_parts) != len(pattern_parts):
        return False
    return all(
        fnmatchcase(part, pat) for part, pat in zip(path_parts, pattern_parts)
    )


class FileClassifier:
    """Classifies files using a fixed set of pattern tables.

    The default instance uses the built-in tables; ``ScanConfig`` constructs
    instances with extended tables. Instances are immutable after
    construction and safe to share between concurrent scans.

    Usage::

        classifier = FileClassifier()
        classifier.classify("Dockerfile", "docker/Dockerfile")
        # FileKind.BUILD_CONFIG
    """

    def __init__(
        self,
        provenance_patterns: Iterable[str] = PROVENANCE_FILE_PATTERNS,
        build_config_files: Iterable[str] = BUILD_CONFIG_FILES,
        ci_config_patterns: Iterable[str] = CI_CONFIG_PATTERNS,
    ) -> None:
        self._provenance_patterns = tuple(p.lower() for p in provenance_patterns)
        self._build_config_files = frozenset(build_config_files)
        self._ci_config_patterns = tuple(ci_config_patterns)

    def is_provenance_file(self, name: str) -> bool:
        """Check whether a filename matches a provenance naming convention.

        Matching is case-insensitive and looks at the filename only.
        """
        lower = name.lower()
        return any(fnmatchcase(lower, pat) for pat in self._provenance_patterns)

    def is_build_config(self, name: str) -> bool:
        """Check whether a filename is a known build description (exact match)."""
        return name in self._build_config_files

    def is_ci_config(self, relative_path: str) -> bool:
        """Check whether a root-relative POSIX path is a CI configuration file."""
        return any(
            _match_anchored(relative_path, pat) for pat in self._ci_config_patterns
        )

    def classify(self, name: str, relative_path: str) -> FileKind | None:
        """Classify a file by name and workspace-relative path.

        Args:
            name: The file's basename.
            relative_path: Path relative to the workspace root, using ``/``
                as the separator.

        Returns:
            The file's ``FileKind``, or None if it is irrelevant.
        """
        if self.is_provenance_file(name):
            return FileKind.PROVENANCE
        if self.is_build_config(name):
            return FileKind.BUILD_CONFIG
        if self.is_ci_config(relative_path):
            return FileKind.CI_CONFIG
        return None


_DEFAULT_CLASSIFIER = FileClassifier()


def classify(name: str, relative_path: str) -> FileKind | None:
    """Classify a file using the built-in pattern tables."""
    return _DEFAULT_CLASSIFIER.classify(name, relative_path)
