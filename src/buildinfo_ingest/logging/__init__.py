"""Structured logging utilities."""

from .audit import AuditEvent, JsonlAuditLogger, summarize_document, utc_timestamp

__all__ = ["AuditEvent", "JsonlAuditLogger", "summarize_document", "utc_timestamp"]
