"""In-process host adapter for the ``scan`` tool.

A plugin host hands the scanner a tool-input mapping plus the workspace it is
running in, and expects a list of findings back. This module resolves the
workspace root from those two sources and runs one independent scan per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from attestguard.core.findings import Finding
from attestguard.core.scanner import CancellationToken, ScanConfig, WorkspaceScanner

logger = logging.getLogger(__name__)

TOOL_NAME = "scan"
WORKSPACE_ROOT_KEY = "workspace_root"


def resolve_workspace_root(tool_input: Mapping[str, Any], workspace_root: str = "") -> str:
    """Pick the workspace to scan.

    A non-empty string under ``workspace_root`` in *tool_input* overrides the
    host's ambient *workspace_root*. Returns "" when neither is set.
    """
    explicit = tool_input.get(WORKSPACE_ROOT_KEY)
    if isinstance(explicit, str) and explicit:
        return explicit
    return workspace_root or ""


def handle_scan(
    tool_input: Mapping[str, Any],
    workspace_root: str = "",
    token: CancellationToken | None = None,
    config: ScanConfig | None = None,
) -> list[Finding]:
    """Run the ``scan`` tool for one host request.

    Args:
        tool_input: The request's input mapping.
        workspace_root: The host's ambient workspace root, if any.
        token: Cancellation token tied to the request.
        config: Scan configuration; defaults to the built-in tables.

    Returns:
        The findings for the resolved workspace, or an empty list when no
        workspace can be resolved.

    Raises:
        ScanCancelled: The request was cancelled mid-scan.
    """
    root = resolve_workspace_root(tool_input, workspace_root)
    if not root:
        logger.debug("No workspace root supplied; returning no findings")
        return []
    return WorkspaceScanner(config).scan(root, token=token)
