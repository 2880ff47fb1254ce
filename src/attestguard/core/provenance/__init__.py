"""Provenance validator for in-toto / SLSA attestation files.

    from attestguard.core.provenance import validate

    reasons = validate(path.read_text())
    if reasons:
        print("incomplete:", ", ".join(reasons))
"""

from attestguard.core.provenance.models import Material, SLSAPredicate, Statement, Subject
from attestguard.core.provenance.validator import (
    check_statement,
    parse_statement,
    validate,
    validate_file,
)

__all__ = [
    "Material",
    "SLSAPredicate",
    "Statement",
    "Subject",
    "check_statement",
    "parse_statement",
    "validate",
    "validate_file",
]
