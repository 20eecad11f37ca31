"""Buildinfo ingestion entrypoint: limits, schema gate, parse, derive, audit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from buildinfo_ingest.config import ConfigOverrides, IngestConfig, load_effective_config
from buildinfo_ingest.errors import BuildDateRejectedError, BuildInfoError
from buildinfo_ingest.identifiers import SourceReference, build_source_reference
from buildinfo_ingest.limits import DocumentBlockedError, enforce_document_limits
from buildinfo_ingest.logging import (
    AuditEvent,
    JsonlAuditLogger,
    summarize_document,
    utc_timestamp,
)
from buildinfo_ingest.parser import BuildInfoRecord, DateParseWarning, parse_buildinfo_blob
from buildinfo_ingest.predicates import DerivedGraph, derive_predicates
from buildinfo_ingest.processor import Document, validate_schema


@dataclass(slots=True, frozen=True)
class IngestResult:
    """Everything derived from one buildinfo document."""

    request_id: str
    record: BuildInfoRecord
    source: SourceReference
    graph: DerivedGraph
    warnings: tuple[DateParseWarning, ...] = ()

    def warning_messages(self) -> list[str]:
        """Return warnings as stable `CODE: message` strings."""
        return [
            f"{warning.code}: {warning.field} value {warning.value!r} could not be parsed"
            for warning in self.warnings
        ]

    def to_public_dict(self) -> dict[str, object]:
        """Return a JSON-ready view of the record and its facts."""
        return {
            "record": _record_to_dict(self.record),
            "source": self.source.to_public_dict(),
            **self.graph.to_public_dict(),
        }


class BuildInfoIngestor:
    """Runs the buildinfo pipeline for one document at a time."""

    def __init__(self, config: IngestConfig) -> None:
        self._config = config
        self._limits = config.limits
        self._strict_build_date = config.parsing.strict_build_date
        self._audit_logger: JsonlAuditLogger | None = None
        if config.audit.enabled:
            self._audit_logger = JsonlAuditLogger(path=config.data_dir / "audit.jsonl")
        self._request_counter = 0

    @property
    def config(self) -> IngestConfig:
        """Return the effective configuration."""
        return self._config

    @property
    def audit_logger(self) -> JsonlAuditLogger | None:
        """Return the audit logger, or None when auditing is disabled."""
        return self._audit_logger

    def ingest(self, document: Document, request_id: str | None = None) -> IngestResult:
        """Process a document, raising on blocked or invalid input."""
        active_request_id = request_id or self.next_request_id()
        try:
            result = self._run(document, active_request_id)
        except (DocumentBlockedError, BuildInfoError) as error:
            self.log_document(
                request_id=active_request_id,
                document=document,
                error_code=error.code,
            )
            raise
        self.log_document(request_id=active_request_id, document=document, result=result)
        return result

    def handle_document(
        self, document: Document, request_id: str | None = None
    ) -> dict[str, object]:
        """Process a document and return a response envelope instead of raising."""
        active_request_id = request_id or self.next_request_id()
        try:
            result = self.ingest(document, request_id=active_request_id)
        except DocumentBlockedError as error:
            return self.blocked_response(
                request_id=active_request_id,
                reason=error.reason,
                hint=error.hint,
            )
        except BuildInfoError as error:
            return self.error_response(
                request_id=active_request_id,
                code=error.code,
                message=str(error),
            )
        return self.success_response(
            request_id=active_request_id,
            result=result.to_public_dict(),
            warnings=result.warning_messages(),
        )

    def _run(self, document: Document, request_id: str) -> IngestResult:
        enforce_document_limits(document, self._limits)
        validate_schema(document)
        parsed = parse_buildinfo_blob(document.blob)
        if self._strict_build_date and parsed.warnings:
            raise BuildDateRejectedError(parsed.warnings[0].value)
        source = build_source_reference(parsed.record)
        graph = derive_predicates(parsed.record, source)
        return IngestResult(
            request_id=request_id,
            record=parsed.record,
            source=source,
            graph=graph,
            warnings=parsed.warnings,
        )

    def next_request_id(self) -> str:
        """Generate deterministic request IDs for calls without one."""
        self._request_counter += 1
        return f"req-{self._request_counter:06d}"

    @staticmethod
    def success_response(
        request_id: str,
        result: dict[str, object],
        warnings: list[str] | None = None,
    ) -> dict[str, object]:
        """Build success envelope."""
        return {
            "request_id": request_id,
            "ok": True,
            "result": result,
            "warnings": warnings or [],
            "blocked": False,
        }

    @staticmethod
    def error_response(request_id: str, code: str, message: str) -> dict[str, object]:
        """Build explicit error envelope."""
        return {
            "request_id": request_id,
            "ok": False,
            "result": {},
            "warnings": [],
            "blocked": False,
            "error": {"code": code, "message": message},
        }

    @staticmethod
    def blocked_response(request_id: str, reason: str, hint: str) -> dict[str, object]:
        """Build explicit blocked response envelope."""
        return {
            "request_id": request_id,
            "ok": False,
            "result": {"reason": reason, "hint": hint},
            "warnings": [],
            "blocked": True,
            "error": {"code": DocumentBlockedError.code, "message": reason},
        }

    def log_document(
        self,
        request_id: str,
        document: Document,
        result: IngestResult | None = None,
        error_code: str | None = None,
    ) -> None:
        """Log one content-free ingest event."""
        if self._audit_logger is None:
            return
        metadata = summarize_document(document)
        warning_codes: list[str] = []
        if result is not None:
            metadata["binary_count"] = len(result.record.binaries)
            metadata["dependency_count"] = len(result.record.build_dependencies)
            metadata["predicate_count"] = len(result.graph.predicates)
            warning_codes = [warning.code for warning in result.warnings]
        event = AuditEvent(
            timestamp=utc_timestamp(),
            request_id=request_id,
            document_type=document.type,
            ok=result is not None,
            error_code=error_code,
            warning_codes=warning_codes,
            metadata=metadata,
        )
        self._audit_logger.append(event)


def create_ingestor(
    root: str = ".",
    data_dir: str | None = None,
    overrides: ConfigOverrides | None = None,
) -> BuildInfoIngestor:
    """Create a configured ingestor instance."""
    effective = overrides or ConfigOverrides()
    if data_dir is not None and effective.data_dir is None:
        effective = ConfigOverrides(
            data_dir=Path(data_dir).resolve(),
            max_document_bytes=effective.max_document_bytes,
            strict_build_date=effective.strict_build_date,
            audit_enabled=effective.audit_enabled,
        )
    config = load_effective_config(Path(root), effective)
    return BuildInfoIngestor(config=config)


def _record_to_dict(record: BuildInfoRecord) -> dict[str, object]:
    return {
        "source": record.source,
        "binaries": list(record.binaries),
        "version": record.version,
        "architecture": record.architecture,
        "distro": record.distro,
        "build_date": record.build_date.isoformat() if record.has_build_date else None,
        "build_dependencies": list(record.build_dependencies),
    }
