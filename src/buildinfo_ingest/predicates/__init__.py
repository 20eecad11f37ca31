"""Graph fact derivation."""

from .builder import (
    DEPENDENCY_JUSTIFICATION,
    SOURCE_COLLECTOR,
    SOURCE_JUSTIFICATION,
    SOURCE_ORIGIN,
    derive_predicates,
    parse_dependency,
    resolve_binaries,
    resolve_dependencies,
    split_dependency,
)
from .models import (
    DEPENDENCY_TYPE_DIRECT,
    MATCH_ALL_VERSIONS,
    MATCH_SPECIFIC_VERSION,
    DerivedGraph,
    HasSourceAt,
    IsDependency,
    Predicate,
    match_flag_for,
)

__all__ = [
    "DEPENDENCY_JUSTIFICATION",
    "DEPENDENCY_TYPE_DIRECT",
    "DerivedGraph",
    "HasSourceAt",
    "IsDependency",
    "MATCH_ALL_VERSIONS",
    "MATCH_SPECIFIC_VERSION",
    "Predicate",
    "SOURCE_COLLECTOR",
    "SOURCE_JUSTIFICATION",
    "SOURCE_ORIGIN",
    "derive_predicates",
    "match_flag_for",
    "parse_dependency",
    "resolve_binaries",
    "resolve_dependencies",
    "split_dependency",
]
