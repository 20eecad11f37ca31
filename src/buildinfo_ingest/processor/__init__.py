"""Document models and the buildinfo schema gate."""

from .buildinfo import REQUIRED_FIELDS, ensure_buildinfo_type, field_names, unpack, validate_schema
from .models import (
    DOCUMENT_BUILDINFO,
    DOCUMENT_CYCLONEDX,
    DOCUMENT_ITE6_SLSA,
    DOCUMENT_SPDX,
    DOCUMENT_UNKNOWN,
    Document,
    decode_blob,
)

__all__ = [
    "DOCUMENT_BUILDINFO",
    "DOCUMENT_CYCLONEDX",
    "DOCUMENT_ITE6_SLSA",
    "DOCUMENT_SPDX",
    "DOCUMENT_UNKNOWN",
    "Document",
    "REQUIRED_FIELDS",
    "decode_blob",
    "ensure_buildinfo_type",
    "field_names",
    "unpack",
    "validate_schema",
]
