from __future__ import annotations

from pathlib import Path

import pytest

from buildinfo_ingest.config import ConfigOverrides
from buildinfo_ingest.limits import DocumentBlockedError, DocumentLimits, enforce_document_limits
from buildinfo_ingest.processor import DOCUMENT_BUILDINFO, Document
from buildinfo_ingest.service import create_ingestor


def test_oversized_document_is_blocked() -> None:
    document = Document(blob=b"a" * 20, type=DOCUMENT_BUILDINFO)

    with pytest.raises(DocumentBlockedError) as excinfo:
        enforce_document_limits(document, DocumentLimits(max_document_bytes=10))

    assert excinfo.value.reason == "Document exceeds max_document_bytes limit."


def test_empty_document_is_blocked() -> None:
    with pytest.raises(DocumentBlockedError) as excinfo:
        enforce_document_limits(Document(blob=b"", type=DOCUMENT_BUILDINFO), DocumentLimits())

    assert excinfo.value.reason == "Document blob is empty."


def test_blocked_document_returns_blocked_envelope(tmp_path: Path) -> None:
    ingestor = create_ingestor(
        root=str(tmp_path), overrides=ConfigOverrides(max_document_bytes=10)
    )

    response = ingestor.handle_document(
        Document(blob=b"Source: attr\n" * 4, type=DOCUMENT_BUILDINFO), request_id="req-big"
    )

    assert response["blocked"] is True
    assert response["ok"] is False
    assert response["error"] == {
        "code": "DOCUMENT_BLOCKED",
        "message": "Document exceeds max_document_bytes limit.",
    }
    assert response["result"]["hint"]
