"""Error types raised while ingesting buildinfo documents."""

from __future__ import annotations


class BuildInfoError(ValueError):
    """Base class for deterministic buildinfo ingestion failures."""

    code = "BUILDINFO_ERROR"


class SchemaMismatchError(BuildInfoError):
    """Raised when a document is not tagged as a buildinfo document."""

    code = "SCHEMA_MISMATCH"

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Expected document type: {expected}, actual document type: {actual}")
        self.expected = expected
        self.actual = actual


class MissingFieldError(BuildInfoError):
    """Raised when a required header field never appears in the document."""

    code = "MISSING_FIELD"

    def __init__(self, field: str) -> None:
        super().__init__(f"Field {field} is missing in buildinfo document.")
        self.field = field


class MalformedDependencyError(BuildInfoError):
    """Raised when a dependency spec has no `(=` version pin."""

    code = "MALFORMED_DEPENDENCY"

    def __init__(self, spec: str) -> None:
        super().__init__(f"Failed to parse dependency {spec!r}.")
        self.spec = spec


class MalformedIdentifierError(BuildInfoError):
    """Raised when a package identifier cannot be decomposed."""

    code = "MALFORMED_IDENTIFIER"

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Malformed package identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class MissingBinaryError(BuildInfoError):
    """Raised when a record declares no usable binary package."""

    code = "MISSING_BINARY"

    def __init__(self) -> None:
        super().__init__("No binary found in buildinfo document.")


class BuildDateRejectedError(BuildInfoError):
    """Raised in strict mode when Build-Date could not be parsed."""

    code = "BUILD_DATE_REJECTED"

    def __init__(self, value: str) -> None:
        super().__init__(f"Build-Date value {value!r} is not a valid RFC-1123 timestamp.")
        self.value = value
