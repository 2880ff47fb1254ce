"""Structural completeness checks for provenance attestation files.

Parsing strategy
----------------
1. Parse the whole document as a single JSON object.
2. If that fails, treat the text as JSON Lines and use the first line that
   parses to a JSON object. Later statements in a multi-statement file are
   not validated.
3. If nothing parses, validate an empty statement. Unparsable files are
   therefore reported as maximally incomplete rather than raising.

Completeness
------------
A statement is complete iff its subject list is non-empty, every subject has
a name and a non-empty digest, a predicate is present, and the predicate
declares a builder id and at least one material. Every violated condition is
reported, in that order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from attestguard.core.provenance.models import Statement

logger = logging.getLogger(__name__)

MISSING_SUBJECT = "missing subject"
SUBJECT_MISSING_NAME = "subject missing name"
SUBJECT_MISSING_DIGEST = "subject missing digest"
MISSING_PREDICATE = "missing predicate"
MISSING_BUILDER_ID = "missing builder ID"
MISSING_MATERIALS = "missing materials"


def _load_object(text: str) -> dict | None:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def parse_statement(text: str) -> Statement:
    """Parse attestation text into a ``Statement``.

    Never raises: text with no usable JSON object yields an empty statement.
    """
    data = _load_object(text)
    if data is None:
        for line in text.split("\n"):
            line = line.strip()
            if not line:
                continue
            data = _load_object(line)
            if data is not None:
                break
    if data is None:
        logger.debug("No parsable in-toto statement found")
    return Statement.from_json(data)


def check_statement(stmt: Statement) -> list[str]:
    """Return every completeness violation of *stmt*, in check order."""
    reasons: list[str] = []

    if not stmt.subject:
        reasons.append(MISSING_SUBJECT)
    else:
        for subj in stmt.subject:
            if not subj.name:
                reasons.append(SUBJECT_MISSING_NAME)
            if not subj.digest:
                reasons.append(SUBJECT_MISSING_DIGEST)

    if not stmt.has_predicate:
        reasons.append(MISSING_PREDICATE)
    else:
        pred = stmt.slsa_predicate()
        if not pred.builder_id:
            reasons.append(MISSING_BUILDER_ID)
        if not pred.materials:
            reasons.append(MISSING_MATERIALS)

    return reasons


def validate(contents: str) -> list[str] | None:
    """Validate the contents of a provenance file.

    Args:
        contents: Full text of the attestation file.

    Returns:
        The ordered list of missing-field reasons, or None if the statement
        is complete.
    """
    reasons = check_statement(parse_statement(contents))
    return reasons or None


def validate_file(path: Path) -> list[str] | None:
    """Validate a provenance file on disk.

    A file that cannot be read is skipped: it yields None (no finding) and
    the error is logged.
    """
    try:
        contents = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        logger.warning("Cannot read provenance file %s: %s", path, exc)
        return None
    return validate(contents)
