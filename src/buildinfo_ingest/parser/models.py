"""Typed models for parsed buildinfo content."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

ZERO_BUILD_DATE = datetime.min.replace(tzinfo=UTC)


@dataclass(slots=True, frozen=True)
class BuildInfoRecord:
    """Build provenance extracted from one buildinfo document."""

    source: str = ""
    binaries: tuple[str, ...] = ()
    version: str = ""
    architecture: str = ""
    distro: str = ""
    build_date: datetime = ZERO_BUILD_DATE
    build_dependencies: tuple[str, ...] = ()

    @property
    def has_build_date(self) -> bool:
        """Return True when Build-Date was parsed successfully."""
        return self.build_date != ZERO_BUILD_DATE


@dataclass(slots=True, frozen=True)
class DateParseWarning:
    """Non-fatal Build-Date parse failure."""

    field: str
    value: str
    reason: str
    code: str = "DATE_PARSE"


@dataclass(slots=True, frozen=True)
class ParsedBuildInfo:
    """Parsed record plus warnings collected along the way."""

    record: BuildInfoRecord
    warnings: tuple[DateParseWarning, ...] = ()
