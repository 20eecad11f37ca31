"""Schema gate for Debian buildinfo documents."""

from __future__ import annotations

from buildinfo_ingest.errors import MissingFieldError, SchemaMismatchError
from buildinfo_ingest.processor.models import DOCUMENT_BUILDINFO, Document

REQUIRED_FIELDS = (
    "Source",
    "Binary",
    "Version",
    "Installed-Build-Depends",
    "Checksums-Md5",
    "Checksums-Sha1",
    "Build-Origin",
    "Build-Architecture",
    "Build-Date",
    "Build-Path",
)


def ensure_buildinfo_type(document: Document) -> None:
    """Raise SchemaMismatchError unless the document is tagged BUILDINFO."""
    if document.type != DOCUMENT_BUILDINFO:
        raise SchemaMismatchError(expected=DOCUMENT_BUILDINFO, actual=document.type)


def field_names(text: str) -> set[str]:
    """Return candidate field names: the text before the first colon of each line."""
    return {line.split(":", 1)[0] for line in text.splitlines()}


def validate_schema(document: Document) -> None:
    """Check type tag and required field presence, reporting in declaration order."""
    ensure_buildinfo_type(document)
    present = field_names(document.text())
    for field in REQUIRED_FIELDS:
        if field not in present:
            raise MissingFieldError(field)


def unpack(document: Document) -> tuple[Document, ...]:
    """Return nested documents; buildinfo files never carry any."""
    ensure_buildinfo_type(document)
    return ()
