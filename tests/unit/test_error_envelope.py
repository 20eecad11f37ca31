from __future__ import annotations

from pathlib import Path

from buildinfo_ingest.processor import DOCUMENT_BUILDINFO, DOCUMENT_CYCLONEDX, Document
from buildinfo_ingest.service import create_ingestor


def test_schema_mismatch_returns_explicit_error(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))

    response = ingestor.handle_document(
        Document(blob=b"{}", type=DOCUMENT_CYCLONEDX), request_id="abc-123"
    )

    assert response["ok"] is False
    assert response["blocked"] is False
    assert response["request_id"] == "abc-123"
    assert response["error"] == {
        "code": "SCHEMA_MISMATCH",
        "message": "Expected document type: BUILDINFO, actual document type: CYCLONEDX",
    }


def test_missing_field_returns_field_name(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))

    response = ingestor.handle_document(
        Document(blob=b"Source: attr\nBinary: attr\n", type=DOCUMENT_BUILDINFO)
    )

    assert response["ok"] is False
    assert response["error"] == {
        "code": "MISSING_FIELD",
        "message": "Field Version is missing in buildinfo document.",
    }
    assert str(response["request_id"]).startswith("req-")


def test_generated_request_ids_are_sequential(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))
    document = Document(blob=b"Source: attr\n", type=DOCUMENT_BUILDINFO)

    first = ingestor.handle_document(document)
    second = ingestor.handle_document(document)

    assert first["request_id"] == "req-000001"
    assert second["request_id"] == "req-000002"
