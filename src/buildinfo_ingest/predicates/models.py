"""Graph facts emitted for a buildinfo document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from buildinfo_ingest.identifiers.models import PackageReference, SourceReference

MATCH_SPECIFIC_VERSION = "SPECIFIC_VERSION"
MATCH_ALL_VERSIONS = "ALL_VERSIONS"
DEPENDENCY_TYPE_DIRECT = "DIRECT"


def match_flag_for(package: PackageReference) -> str:
    """Return how strictly a fact should match the referenced package version."""
    if package.version:
        return MATCH_SPECIFIC_VERSION
    return MATCH_ALL_VERSIONS


@dataclass(slots=True, frozen=True)
class HasSourceAt:
    """A binary package was built from a source package."""

    package: PackageReference
    source: SourceReference
    known_since: datetime
    justification: str
    origin: str
    collector: str
    package_match_flag: str = MATCH_SPECIFIC_VERSION

    kind = "has_source_at"

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view."""
        return {
            "kind": self.kind,
            "package": self.package.to_public_dict(),
            "source": self.source.to_public_dict(),
            "known_since": self.known_since.isoformat(),
            "justification": self.justification,
            "origin": self.origin,
            "collector": self.collector,
            "package_match_flag": self.package_match_flag,
        }


@dataclass(slots=True, frozen=True)
class IsDependency:
    """A package depended on another package at build time."""

    package: PackageReference
    dependency: PackageReference
    justification: str
    dependency_type: str = DEPENDENCY_TYPE_DIRECT
    version_range: str = ""
    dependency_match_flag: str = MATCH_SPECIFIC_VERSION

    kind = "is_dependency"

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view."""
        return {
            "kind": self.kind,
            "package": self.package.to_public_dict(),
            "dependency": self.dependency.to_public_dict(),
            "justification": self.justification,
            "dependency_type": self.dependency_type,
            "version_range": self.version_range,
            "dependency_match_flag": self.dependency_match_flag,
        }


Predicate = HasSourceAt | IsDependency


@dataclass(slots=True, frozen=True)
class DerivedGraph:
    """Ordered predicate batch plus the binary identifiers it was keyed on."""

    predicates: tuple[Predicate, ...]
    identifiers: tuple[str, ...]

    def has_source_at(self) -> tuple[HasSourceAt, ...]:
        """Return HasSourceAt facts in emission order."""
        return tuple(item for item in self.predicates if isinstance(item, HasSourceAt))

    def is_dependency(self) -> tuple[IsDependency, ...]:
        """Return IsDependency facts in emission order."""
        return tuple(item for item in self.predicates if isinstance(item, IsDependency))

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view."""
        return {
            "identifiers": list(self.identifiers),
            "predicates": [item.to_public_dict() for item in self.predicates],
        }
