"""Buildinfo blob parsing."""

from .blob import (
    BUILD_DATE_LAYOUT,
    MONTH_NAMES,
    WEEKDAY_NAMES,
    parse_build_date,
    parse_buildinfo_blob,
)
from .models import ZERO_BUILD_DATE, BuildInfoRecord, DateParseWarning, ParsedBuildInfo

__all__ = [
    "BUILD_DATE_LAYOUT",
    "BuildInfoRecord",
    "DateParseWarning",
    "MONTH_NAMES",
    "ParsedBuildInfo",
    "WEEKDAY_NAMES",
    "ZERO_BUILD_DATE",
    "parse_build_date",
    "parse_buildinfo_blob",
]
