from __future__ import annotations

import json
from pathlib import Path

from buildinfo_ingest.config import ConfigOverrides
from buildinfo_ingest.logging import AuditEvent, JsonlAuditLogger
from buildinfo_ingest.processor import DOCUMENT_BUILDINFO, Document
from buildinfo_ingest.service import create_ingestor

FIXTURE = Path(__file__).resolve().parents[2] / "fixtures" / "attr_2.5.1-1_amd64.buildinfo"


def test_audit_log_writes_jsonl_schema(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))
    ingestor.handle_document(
        Document(blob=FIXTURE.read_bytes(), type=DOCUMENT_BUILDINFO), request_id="req-100"
    )

    audit_path = tmp_path / ".buildinfo_ingest" / "audit.jsonl"
    assert audit_path.exists()

    lines = audit_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[-1])

    assert set(event.keys()) == {
        "document_type",
        "error_code",
        "metadata",
        "ok",
        "request_id",
        "timestamp",
        "warning_codes",
    }
    assert event["request_id"] == "req-100"
    assert event["document_type"] == DOCUMENT_BUILDINFO
    assert event["ok"] is True
    assert event["error_code"] is None
    assert event["warning_codes"] == []
    assert event["timestamp"].endswith("Z")
    assert event["metadata"]["binary_count"] == 2
    assert event["metadata"]["dependency_count"] == 5
    assert event["metadata"]["predicate_count"] == 12


def test_audit_metadata_never_contains_document_text(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))
    blob = FIXTURE.read_bytes()
    ingestor.handle_document(Document(blob=blob, type=DOCUMENT_BUILDINFO, source="mirror"))

    raw = (tmp_path / ".buildinfo_ingest" / "audit.jsonl").read_text(encoding="utf-8")
    event = json.loads(raw.splitlines()[-1])

    assert "attr-udeb" not in raw
    assert "/build/" not in raw
    assert event["metadata"]["blob_bytes"] == len(blob)
    assert event["metadata"]["source_present"] is True


def test_failed_ingest_records_error_code(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path))
    ingestor.handle_document(Document(blob=b"Source: attr\n", type=DOCUMENT_BUILDINFO))

    events = ingestor.audit_logger.read() if ingestor.audit_logger else []

    assert len(events) == 1
    assert events[0]["ok"] is False
    assert events[0]["error_code"] == "MISSING_FIELD"
    assert "binary_count" not in events[0]["metadata"]


def test_audit_disabled_writes_nothing(tmp_path: Path) -> None:
    ingestor = create_ingestor(root=str(tmp_path), overrides=ConfigOverrides(audit_enabled=False))
    ingestor.handle_document(Document(blob=FIXTURE.read_bytes(), type=DOCUMENT_BUILDINFO))

    assert ingestor.audit_logger is None
    assert not (tmp_path / ".buildinfo_ingest" / "audit.jsonl").exists()


def test_reader_skips_corrupt_lines_and_applies_limit(tmp_path: Path) -> None:
    logger = JsonlAuditLogger(path=tmp_path / "audit.jsonl")
    for index in range(3):
        logger.append(
            AuditEvent(
                timestamp=f"2026-01-0{index + 1}T00:00:00.000Z",
                request_id=f"req-{index}",
                document_type=DOCUMENT_BUILDINFO,
                ok=True,
                error_code=None,
                warning_codes=[],
                metadata={},
            )
        )
    with logger.path.open("a", encoding="utf-8") as handle:
        handle.write("{not-json\n")

    assert [entry["request_id"] for entry in logger.read(limit=2)] == ["req-1", "req-2"]
    assert [entry["request_id"] for entry in logger.read(since="2026-01-02")] == [
        "req-1",
        "req-2",
    ]
    assert logger.read(limit=0) == []
