"""Typed models for collected documents."""

from __future__ import annotations

from dataclasses import dataclass

DOCUMENT_UNKNOWN = "UNKNOWN"
DOCUMENT_SPDX = "SPDX"
DOCUMENT_CYCLONEDX = "CYCLONEDX"
DOCUMENT_ITE6_SLSA = "ITE6_SLSA"
DOCUMENT_BUILDINFO = "BUILDINFO"


@dataclass(slots=True, frozen=True)
class Document:
    """Raw document handed over by a collector, tagged with its type."""

    blob: bytes
    type: str
    source: str | None = None

    def text(self) -> str:
        """Return the blob decoded as UTF-8, replacing undecodable bytes."""
        return decode_blob(self.blob)


def decode_blob(blob: bytes | str) -> str:
    """Decode a raw blob to text without failing on invalid bytes."""
    if isinstance(blob, str):
        return blob
    return blob.decode("utf-8", errors="replace")
