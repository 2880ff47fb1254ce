"""AttestGuard exception hierarchy.

All public exceptions inherit from AttestGuardError, giving callers a single
base class to catch when they want to handle any AttestGuard-specific failure
without swallowing unrelated errors.

Per-file problems (unreadable files, malformed JSON, unreadable directories)
are never raised: the scanner recovers from them locally and moves on.
"""


class AttestGuardError(Exception):
    """Base exception for all AttestGuard errors."""


class ScanCancelled(AttestGuardError):
    """Raised when a workspace scan is cancelled through its token.

    Cancellation is a deliberate termination, not a failure: no partial
    findings are returned to the caller and no finding records it.
    """


class ConfigError(AttestGuardError):
    """Raised when a scan configuration file cannot be loaded.

    Covers unreadable files, invalid YAML, unknown keys, and values
    that are not lists of strings.
    """
