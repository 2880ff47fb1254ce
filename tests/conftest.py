"""Shared fixtures for attestguard tests.

Ready-made workspaces mirroring the situations the scanner distinguishes:
build config without provenance, build config with complete provenance,
and incomplete provenance.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.helpers import (
    CLEAN_MAKEFILE,
    DOCKERFILE_WITH_RISKS,
    complete_statement,
    write_file,
)


@pytest.fixture
def without_provenance_dir(tmp_path: Path) -> Path:
    """Workspace with a risky Dockerfile and no attestation."""
    write_file(tmp_path, "Dockerfile", DOCKERFILE_WITH_RISKS)
    write_file(tmp_path, "src/main.go", "package main\n")
    return tmp_path


@pytest.fixture
def with_provenance_dir(tmp_path: Path) -> Path:
    """Workspace with a clean Makefile and a complete attestation."""
    write_file(tmp_path, "Makefile", CLEAN_MAKEFILE)
    write_file(tmp_path, "dist/app.intoto.json", json.dumps(complete_statement()))
    return tmp_path


@pytest.fixture
def incomplete_provenance_dir(tmp_path: Path) -> Path:
    """Workspace whose attestation lacks builder id and materials."""
    stmt = complete_statement()
    stmt["predicate"] = {"buildType": "make"}
    write_file(tmp_path, "Makefile", CLEAN_MAKEFILE)
    write_file(tmp_path, "provenance.json", json.dumps(stmt))
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An empty workspace."""
    return tmp_path
