"""File classifier for provenance artifacts and build/CI configuration.

    from attestguard.core.classifier import FileKind, classify
"""

from attestguard.core.classifier.classifier import FileClassifier, FileKind, classify
from attestguard.core.classifier.patterns import (
    BUILD_CONFIG_FILES,
    CI_CONFIG_PATTERNS,
    PROVENANCE_FILE_PATTERNS,
    SKIPPED_DIRS,
)

__all__ = [
    "BUILD_CONFIG_FILES",
    "CI_CONFIG_PATTERNS",
    "FileClassifier",
    "FileKind",
    "PROVENANCE_FILE_PATTERNS",
    "SKIPPED_DIRS",
    "classify",
]
