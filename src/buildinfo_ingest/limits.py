"""Size policy applied to documents before parsing."""

from __future__ import annotations

from dataclasses import dataclass

from buildinfo_ingest.processor.models import Document


@dataclass(slots=True, frozen=True)
class DocumentLimits:
    """Runtime limits for incoming documents."""

    max_document_bytes: int = 4 * 1024 * 1024


@dataclass(slots=True, frozen=True)
class DocumentBlockedError(Exception):
    """Raised when limits policy blocks a document."""

    reason: str
    hint: str

    code = "DOCUMENT_BLOCKED"


def enforce_document_limits(document: Document, limits: DocumentLimits) -> None:
    """Raise DocumentBlockedError when the blob is empty or exceeds max_document_bytes."""
    if not document.blob:
        raise DocumentBlockedError(
            reason="Document blob is empty.",
            hint="Collect the buildinfo file contents before ingesting.",
        )
    if len(document.blob) > limits.max_document_bytes:
        raise DocumentBlockedError(
            reason="Document exceeds max_document_bytes limit.",
            hint="Increase limit via approved configuration.",
        )
