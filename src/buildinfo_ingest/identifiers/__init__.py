"""Canonical package identifiers."""

from .models import PackageReference, SourceReference
from .purl import (
    build_identifier,
    build_source_reference,
    parse_identifier,
    sanitize_name,
    to_identifier,
)

__all__ = [
    "PackageReference",
    "SourceReference",
    "build_identifier",
    "build_source_reference",
    "parse_identifier",
    "sanitize_name",
    "to_identifier",
]
