"""Scan configuration: the pattern tables one scan runs with.

``ScanConfig`` is immutable. The default instance carries the built-in tables;
``load_config`` reads a YAML file whose entries extend (never replace) them:

.. code-block:: yaml

    extra_skip_dirs: [third_party, build]
    extra_build_config_files: [Earthfile]
    extra_ci_config_patterns: [".buildkite/*.yml"]
    extra_provenance_patterns: ["*.slsa.json"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from attestguard.core.classifier import (
    BUILD_CONFIG_FILES,
    CI_CONFIG_PATTERNS,
    PROVENANCE_FILE_PATTERNS,
    SKIPPED_DIRS,
    FileClassifier,
)
from attestguard.core.reproducibility import REPRODUCIBILITY_RULES, ReproducibilityRule
from attestguard.exceptions import ConfigError

logger = logging.getLogger(__name__)

# YAML key -> ScanConfig field it extends
_EXTENSION_KEYS: dict[str, str] = {
    "extra_skip_dirs": "skipped_dirs",
    "extra_build_config_files": "build_config_files",
    "extra_ci_config_patterns": "ci_config_patterns",
    "extra_provenance_patterns": "provenance_patterns",
}


@dataclass(frozen=True)
class ScanConfig:
    """Pattern tables and rules for one scan.

    Attributes:
        skipped_dirs: Directory names never descended into.
        provenance_patterns: Filename globs for attestation artifacts.
        build_config_files: Exact filenames of build descriptions.
        ci_config_patterns: Root-anchored globs for CI configuration.
        rules: Reproducibility rules applied to build/CI files.
    """

    skipped_dirs: frozenset[str] = SKIPPED_DIRS
    provenance_patterns: tuple[str, ...] = PROVENANCE_FILE_PATTERNS
    build_config_files: frozenset[str] = BUILD_CONFIG_FILES
    ci_config_patterns: tuple[str, ...] = CI_CONFIG_PATTERNS
    rules: tuple[ReproducibilityRule, ...] = REPRODUCIBILITY_RULES
    classifier: FileClassifier = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "classifier", FileClassifier(
            provenance_patterns=self.provenance_patterns,
            build_config_files=self.build_config_files,
            ci_config_patterns=self.ci_config_patterns,
        ))

    def extended(
        self,
        skipped_dirs: list[str] | None = None,
        provenance_patterns: list[str] | None = None,
        build_config_files: list[str] | None = None,
        ci_config_patterns: list[str] | None = None,
    ) -> ScanConfig:
        """Return a copy with extra entries appended to the tables."""
        return ScanConfig(
            skipped_dirs=self.skipped_dirs | frozenset(skipped_dirs or ()),
            provenance_patterns=_merge(self.provenance_patterns, provenance_patterns),
            build_config_files=self.build_config_files | frozenset(build_config_files or ()),
            ci_config_patterns=_merge(self.ci_config_patterns, ci_config_patterns),
            rules=self.rules,
        )


def _merge(base: tuple[str, ...], extra: list[str] | None) -> tuple[str, ...]:
    """Append *extra* to *base*, dropping duplicates and keeping order."""
    return tuple(dict.fromkeys((*base, *(extra or ()))))


DEFAULT_CONFIG = ScanConfig()


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ConfigError(f"'{key}' must be a list of non-empty strings")
    return value


def config_from_mapping(data: Any) -> ScanConfig:
    """Build a ``ScanConfig`` from a parsed configuration document.

    Args:
        data: The parsed YAML document. ``None`` (an empty file) yields the
            default configuration.

    Raises:
        ConfigError: The document is not a mapping, has unknown keys, or a
            value is not a list of strings.
    """
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")

    unknown = sorted(str(key) for key in data if key not in _EXTENSION_KEYS)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")

    extras = {
        _EXTENSION_KEYS[key]: _string_list(key, value)
        for key, value in data.items()
        if value is not None
    }
    return DEFAULT_CONFIG.extended(**extras)


def load_config(path: Path) -> ScanConfig:
    """Load a YAML configuration file.

    Raises:
        ConfigError: The file cannot be read or is not a valid configuration.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    config = config_from_mapping(data)
    logger.debug("Loaded scan configuration from %s", path)
    return config
