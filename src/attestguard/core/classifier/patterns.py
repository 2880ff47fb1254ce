"""Filename and path pattern tables used by the file classifier.

The tables are immutable module constants built once at import time. They are
shared by every scan, including concurrent ones, and nothing mutates them;
``ScanConfig`` builds extended copies when a configuration file adds entries.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Provenance artifacts (SLSA / in-toto)
# ---------------------------------------------------------------------------

# Glob patterns matched against the lowercased filename only.
PROVENANCE_FILE_PATTERNS: tuple[str, ...] = (
    "*.intoto.jsonl",
    "*.intoto.json",
    "*.provenance.json",
    "provenance.json",
    "attestation.json",
    "*.att.json",
)

# ---------------------------------------------------------------------------
# Build descriptions
# ---------------------------------------------------------------------------

# Exact, case-sensitive filenames.
BUILD_CONFIG_FILES: frozenset[str] = frozenset({
    "Makefile",
    "Dockerfile",
    "Jenkinsfile",
    "Taskfile.yml",
    "cloudbuild.yaml",
    "cloudbuild.json",
    ".goreleaser.yml",
    ".goreleaser.yaml",
    "build.gradle",
    "build.gradle.kts",
    "pom.xml",
})

# Glob patterns anchored at the workspace root. ``*`` never crosses a
# directory separator, so ``.github/workflows/*.yml`` only matches direct
# children of the workflows directory.
CI_CONFIG_PATTERNS: tuple[str, ...] = (
    ".github/workflows/*.yml",
    ".github/workflows/*.yaml",
    ".gitlab-ci.yml",
    ".circleci/config.yml",
    "azure-pipelines.yml",
)

# ---------------------------------------------------------------------------
# Walk exclusions
# ---------------------------------------------------------------------------

SKIPPED_DIRS: frozenset[str] = frozenset({
    ".git",
    "vendor",
    "node_modules",
    "__pycache__",
    ".venv",
})
