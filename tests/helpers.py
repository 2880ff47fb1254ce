"""Shared test helpers for building fake workspaces on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def write_file(root: Path, relative: str, content: str) -> Path:
    """Write *content* to ``root / relative``, creating parent directories."""
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target


def complete_statement() -> dict[str, Any]:
    """A fully-populated in-toto statement with a SLSA v0.2 predicate."""
    return {
        "_type": "https://in-toto.io/Statement/v0.1",
        "predicateType": "https://slsa.dev/provenance/v0.2",
        "subject": [
            {"name": "app.tar.gz", "digest": {"sha256": "a" * 64}},
        ],
        "predicate": {
            "builder": {"id": "https://github.com/actions/runner"},
            "buildType": "https://github.com/slsa-framework/slsa-github-generator/generic@v1",
            "materials": [
                {
                    "uri": "git+https://github.com/example/app@refs/heads/main",
                    "digest": {"sha1": "b" * 40},
                },
            ],
        },
    }


def finding_keys(findings: list) -> list[tuple[str, str, int, str]]:
    """Reduce findings to sorted (rule_id, path, line, reason) tuples."""
    return sorted(
        (
            f.rule_id,
            f.location.path,
            f.location.start_line,
            f.metadata.get("reason", f.metadata.get("reasons", "")),
        )
        for f in findings
    )


def by_rule(findings: list, rule_id: str) -> list:
    """Return the findings produced by *rule_id*."""
    return [f for f in findings if f.rule_id == rule_id]


DOCKERFILE_WITH_RISKS = (
    "FROM node:latest\n"
    "RUN curl -fsSL https://example.com/install.sh | bash\n"
    "RUN apt-get install curl\n"
    "COPY . /app\n"
)

CLEAN_MAKEFILE = (
    "build:\n"
    "\tgo build -trimpath ./...\n"
)
