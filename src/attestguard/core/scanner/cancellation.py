"""Cooperative cancellation for workspace scans.

The scanner checks its token at every file and directory boundary. Setting the
token from another thread or a signal handler makes the walk unwind with
``ScanCancelled`` at the next boundary.
"""

from __future__ import annotations

import threading

from attestguard.exceptions import ScanCancelled


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Usage::

        token = CancellationToken()
        threading.Timer(30, token.cancel).start()
        try:
            findings = scan_workspace(root, token=token)
        except ScanCancelled:
            ...
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise ``ScanCancelled`` if cancellation has been requested."""
        if self._event.is_set():
            raise ScanCancelled("workspace scan cancelled")
