"""Derive source and dependency facts from a parsed buildinfo record."""

from __future__ import annotations

from buildinfo_ingest.errors import MalformedDependencyError, MissingBinaryError
from buildinfo_ingest.identifiers.models import PackageReference, SourceReference
from buildinfo_ingest.identifiers.purl import build_identifier, parse_identifier
from buildinfo_ingest.parser.models import BuildInfoRecord
from buildinfo_ingest.predicates.models import (
    DEPENDENCY_TYPE_DIRECT,
    DerivedGraph,
    HasSourceAt,
    IsDependency,
    Predicate,
    match_flag_for,
)

SOURCE_JUSTIFICATION = "Binaries are built from source package"
SOURCE_ORIGIN = "Debian BuildInfo Source"
SOURCE_COLLECTOR = "Buildinfo file"
DEPENDENCY_JUSTIFICATION = "Debian BuildInfo Dependency"

DEPENDENCY_DELIMITER = "(="


def split_dependency(spec: str) -> tuple[str, str]:
    """Split a `name(=version)` spec into name and version."""
    name, delimiter, version = spec.partition(DEPENDENCY_DELIMITER)
    if not delimiter:
        raise MalformedDependencyError(spec)
    return name.strip(), version.rstrip("),").strip()


def parse_dependency(spec: str, architecture: str, distro: str) -> PackageReference | None:
    """Resolve a dependency spec to a reference; None when it has no version."""
    name, version = split_dependency(spec)
    identifier = build_identifier(name, version, architecture, distro)
    if not identifier:
        return None
    return parse_identifier(identifier)


def resolve_dependencies(record: BuildInfoRecord) -> tuple[PackageReference, ...]:
    """Resolve every dependency spec of a record in declaration order."""
    resolved: list[PackageReference] = []
    for spec in record.build_dependencies:
        dependency = parse_dependency(spec, record.architecture, record.distro)
        if dependency is not None:
            resolved.append(dependency)
    return tuple(resolved)


def resolve_binaries(record: BuildInfoRecord) -> tuple[tuple[str, PackageReference], ...]:
    """Return (identifier, reference) pairs for representable binaries in declaration order."""
    if not record.binaries:
        raise MissingBinaryError()
    resolved: list[tuple[str, PackageReference]] = []
    for binary in record.binaries:
        if not binary:
            raise MissingBinaryError()
        identifier = build_identifier(
            binary, record.version, record.architecture, record.distro
        )
        if not identifier:
            continue
        resolved.append((identifier, parse_identifier(identifier)))
    return tuple(resolved)


def derive_predicates(record: BuildInfoRecord, source: SourceReference) -> DerivedGraph:
    """Emit one HasSourceAt per binary, each followed by its IsDependency facts."""
    binaries = resolve_binaries(record)
    dependencies = resolve_dependencies(record)

    predicates: list[Predicate] = []
    for _, package in binaries:
        predicates.append(
            HasSourceAt(
                package=package,
                source=source,
                known_since=record.build_date,
                justification=SOURCE_JUSTIFICATION,
                origin=SOURCE_ORIGIN,
                collector=SOURCE_COLLECTOR,
                package_match_flag=match_flag_for(package),
            )
        )
        for dependency in dependencies:
            predicates.append(
                IsDependency(
                    package=package,
                    dependency=dependency,
                    justification=DEPENDENCY_JUSTIFICATION,
                    dependency_type=DEPENDENCY_TYPE_DIRECT,
                    version_range=dependency.version,
                    dependency_match_flag=match_flag_for(dependency),
                )
            )

    # dict keeps first-seen order while dropping repeated binary names.
    identifiers = tuple(dict.fromkeys(identifier for identifier, _ in binaries))
    return DerivedGraph(predicates=tuple(predicates), identifiers=identifiers)
