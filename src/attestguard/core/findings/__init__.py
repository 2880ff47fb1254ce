"""Finding data model and findings sinks.

Submodules
----------
- ``models``: Severity, Confidence, Location, Finding, ScanResult and the
  rule catalog.
- ``sink``: the ``FindingsSink`` interface and the list-backed collector.

All public names are re-exported here::

    from attestguard.core.findings import Finding, FindingsCollector, Severity
"""

from attestguard.core.findings.models import (
    INCOMPLETE_METADATA,
    MISSING_ATTESTATION,
    REPRODUCIBILITY_RISK,
    RULES,
    Confidence,
    Finding,
    Location,
    RuleInfo,
    ScanResult,
    Severity,
)
from attestguard.core.findings.sink import FindingsCollector, FindingsSink

__all__ = [
    "Confidence",
    "Finding",
    "FindingsCollector",
    "FindingsSink",
    "INCOMPLETE_METADATA",
    "Location",
    "MISSING_ATTESTATION",
    "REPRODUCIBILITY_RISK",
    "RULES",
    "RuleInfo",
    "ScanResult",
    "Severity",
]
