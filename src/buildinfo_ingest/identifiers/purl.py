"""Deterministic package-URL construction and decomposition for Debian packages."""

from __future__ import annotations

from urllib.parse import quote, unquote

from buildinfo_ingest.errors import MalformedIdentifierError
from buildinfo_ingest.identifiers.models import PackageReference, SourceReference
from buildinfo_ingest.parser.models import BuildInfoRecord

PURL_SCHEME = "pkg:"
PACKAGE_TYPE = "deb"
SOURCE_NAMESPACE_SUFFIX = "-src"
ARCH_QUALIFIER = "arch"

# RFC 3986 unreserved characters stay literal.
_NAME_SAFE_CHARS = "-._~"


def sanitize_name(name: str) -> str:
    """Percent-escape characters that would collide with identifier separators."""
    return quote(name, safe=_NAME_SAFE_CHARS)


def build_identifier(name: str, version: str, arch: str, distro: str) -> str:
    """Build `pkg:deb/<distro>/<name>@<version>[?arch=<arch>]`, or "" when unversioned."""
    prefix = f"{PURL_SCHEME}{PACKAGE_TYPE}/{distro}/"
    escaped_name = sanitize_name(name)
    if version and arch:
        return f"{prefix}{escaped_name}@{version}?{ARCH_QUALIFIER}={arch}"
    if version:
        return f"{prefix}{escaped_name}@{version}"
    return ""


def parse_identifier(identifier: str) -> PackageReference:
    """Decompose a package identifier into type, namespace, name, version and qualifiers."""
    if not identifier.startswith(PURL_SCHEME):
        raise MalformedIdentifierError(identifier, "missing 'pkg:' scheme")
    remainder = identifier[len(PURL_SCHEME) :]

    remainder, _, subpath = remainder.partition("#")
    remainder, has_qualifiers, raw_qualifiers = remainder.partition("?")
    qualifiers: tuple[tuple[str, str], ...] = ()
    if has_qualifiers:
        qualifiers = _parse_qualifiers(identifier, raw_qualifiers)

    path, has_version, version = remainder.rpartition("@")
    if not has_version or not version:
        raise MalformedIdentifierError(identifier, "missing version")

    segments = path.split("/")
    if len(segments) != 3:
        raise MalformedIdentifierError(identifier, "expected type/namespace/name")
    package_type, namespace, name = segments
    if not package_type:
        raise MalformedIdentifierError(identifier, "missing type")
    if not namespace:
        raise MalformedIdentifierError(identifier, "missing namespace")
    if not name:
        raise MalformedIdentifierError(identifier, "missing name")

    return PackageReference(
        type=package_type.lower(),
        namespace=unquote(namespace),
        name=unquote(name),
        version=unquote(version),
        qualifiers=qualifiers,
        subpath=unquote(subpath.strip("/")),
    )


def _parse_qualifiers(identifier: str, raw: str) -> tuple[tuple[str, str], ...]:
    pairs: list[tuple[str, str]] = []
    for item in raw.split("&"):
        key, has_value, value = item.partition("=")
        if not key or not has_value or not value:
            raise MalformedIdentifierError(identifier, f"invalid qualifier {item!r}")
        pairs.append((key.lower(), unquote(value)))
    return tuple(sorted(pairs))


def to_identifier(reference: PackageReference) -> str:
    """Rebuild the canonical identifier string for a reference."""
    identifier = (
        f"{PURL_SCHEME}{reference.type}/{reference.namespace}/"
        f"{sanitize_name(reference.name)}@{reference.version}"
    )
    if reference.qualifiers:
        identifier += "?" + "&".join(f"{key}={value}" for key, value in reference.qualifiers)
    if reference.subpath:
        identifier += f"#{reference.subpath}"
    return identifier


def build_source_reference(record: BuildInfoRecord) -> SourceReference:
    """Return the source package reference for a record's binaries; empty when Source is blank."""
    if not record.source:
        return SourceReference(type="", namespace="", name="")
    return SourceReference(
        type=PACKAGE_TYPE,
        namespace=record.distro + SOURCE_NAMESPACE_SUFFIX,
        name=record.source,
    )
