"""In-toto statement and SLSA provenance predicate models.

Only the fields the completeness check needs are modelled:

- Statement: ``_type``, ``predicateType``, ``subject``, ``predicate``.
- SLSA (v0.2) predicate: ``builder.id``, ``buildType``, ``materials``.

Decoding is tolerant. A field carrying the wrong JSON type is treated as
absent instead of raising, because the validator must keep going on whatever
a workspace happens to contain.

.. [SLSA] https://slsa.dev/provenance/v0.2
.. [ITE6] https://github.com/in-toto/attestation/blob/main/spec/v1/statement.md
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _digest(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


@dataclass(frozen=True)
class Subject:
    """An artifact the statement is about, identified by name and digest."""

    name: str = ""
    digest: dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_json(cls, data: Any) -> Subject:
        if not isinstance(data, dict):
            return cls()
        return cls(name=_str_or_empty(data.get("name")), digest=_digest(data.get("digest")))


@dataclass(frozen=True)
class Material:
    """A declared build input (e.g., the source repository at a commit)."""

    uri: str = ""
    digest: dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_json(cls, data: Any) -> Material:
        if not isinstance(data, dict):
            return cls()
        return cls(uri=_str_or_empty(data.get("uri")), digest=_digest(data.get("digest")))


@dataclass(frozen=True)
class SLSAPredicate:
    """The SLSA provenance predicate nested under ``predicate``.

    Attributes:
        builder_id: ``builder.id``, the identity of the build platform.
        build_type: ``buildType``, URI describing the build template.
        materials: ``materials``, the inputs consumed by the build.
    """

    builder_id: str = ""
    build_type: str = ""
    materials: tuple[Material, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> SLSAPredicate:
        """Decode a predicate payload; non-object payloads decode as empty."""
        if not isinstance(data, dict):
            return cls()
        builder = data.get("builder")
        builder_id = _str_or_empty(builder.get("id")) if isinstance(builder, dict) else ""
        materials = data.get("materials")
        if not isinstance(materials, list):
            materials = []
        return cls(
            builder_id=builder_id,
            build_type=_str_or_empty(data.get("buildType")),
            materials=tuple(Material.from_json(m) for m in materials),
        )


@dataclass(frozen=True)
class Statement:
    """A parsed in-toto attestation statement.

    Attributes:
        type: ``_type``, the statement schema URI.
        predicate_type: ``predicateType``, the predicate schema URI.
        subject: Artifacts covered by the statement.
        predicate: Raw predicate payload, or None when absent or null.
        has_predicate: True when the document carries a ``predicate`` key,
            even one whose value is null.
    """

    type: str = ""
    predicate_type: str = ""
    subject: tuple[Subject, ...] = ()
    predicate: Any = field(default=None, hash=False)
    has_predicate: bool = False

    @classmethod
    def from_json(cls, data: Any) -> Statement:
        """Decode a statement; anything other than a JSON object decodes as empty."""
        if not isinstance(data, dict):
            return cls()
        subject = data.get("subject")
        if not isinstance(subject, list):
            subject = []
        return cls(
            type=_str_or_empty(data.get("_type")),
            predicate_type=_str_or_empty(data.get("predicateType")),
            subject=tuple(Subject.from_json(s) for s in subject),
            predicate=data.get("predicate"),
            has_predicate="predicate" in data,
        )

    def slsa_predicate(self) -> SLSAPredicate:
        """Decode the predicate payload as a SLSA provenance predicate."""
        return SLSAPredicate.from_json(self.predicate)
