"""AttestGuard: SLSA provenance and build reproducibility auditing for workspaces."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Identifier reported by the host adapter and the CLI version banner.
_PRODUCT_ID = "attestguard/provenance"
