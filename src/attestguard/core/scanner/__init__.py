"""Workspace scanner: walk, classify, dispatch to detectors, apply the workspace rule.

Submodules
----------
- ``engine``: the ``WorkspaceScanner`` class and ``scan_workspace`` helper.
- ``config``: immutable ``ScanConfig`` and the YAML loader.
- ``cancellation``: the cooperative ``CancellationToken``.
"""

from attestguard.core.scanner.cancellation import CancellationToken
from attestguard.core.scanner.config import (
    DEFAULT_CONFIG,
    ScanConfig,
    config_from_mapping,
    load_config,
)
from attestguard.core.scanner.engine import WorkspaceScanner, scan_workspace

__all__ = [
    "CancellationToken",
    "DEFAULT_CONFIG",
    "ScanConfig",
    "WorkspaceScanner",
    "config_from_mapping",
    "load_config",
    "scan_workspace",
]
