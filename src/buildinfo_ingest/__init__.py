"""Debian buildinfo ingestion into build-provenance graph facts."""

from .errors import (
    BuildDateRejectedError,
    BuildInfoError,
    MalformedDependencyError,
    MalformedIdentifierError,
    MissingBinaryError,
    MissingFieldError,
    SchemaMismatchError,
)
from .service import BuildInfoIngestor, IngestResult, create_ingestor

__all__ = [
    "BuildDateRejectedError",
    "BuildInfoError",
    "BuildInfoIngestor",
    "IngestResult",
    "MalformedDependencyError",
    "MalformedIdentifierError",
    "MissingBinaryError",
    "MissingFieldError",
    "SchemaMismatchError",
    "create_ingestor",
]
