"""Tolerant line scanner for Debian buildinfo control files."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from buildinfo_ingest.parser.models import (
    ZERO_BUILD_DATE,
    BuildInfoRecord,
    DateParseWarning,
    ParsedBuildInfo,
)
from buildinfo_ingest.processor.models import decode_blob

FIELD_DELIMITER = ": "
DEPENDENCY_MARKER = "(="
BUILD_DATE_LAYOUT = "Mon, 02 Jan 2006 15:04:05 -0700"

# Day and month names are always English, whatever LC_TIME says.
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_BUILD_DATE_RE = re.compile(
    r"(?P<weekday>[A-Za-z]{3}), (?P<day>\d{2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) (?P<sign>[+-])(?P<zone>\d{4})"
)


def parse_build_date(value: str) -> datetime:
    """Parse an RFC-1123 timestamp with a numeric zone, e.g. `Mon, 02 Jan 2006 15:04:05 -0700`."""
    match = _BUILD_DATE_RE.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"time data {value!r} does not match layout {BUILD_DATE_LAYOUT!r}")
    if match["weekday"] not in WEEKDAY_NAMES:
        raise ValueError(f"unknown day name {match['weekday']!r}")
    if match["month"] not in MONTH_NAMES:
        raise ValueError(f"unknown month name {match['month']!r}")
    if int(match["zone"][2:]) > 59:
        raise ValueError(f"zone offset out of range {match['zone']!r}")
    offset = timedelta(hours=int(match["zone"][:2]), minutes=int(match["zone"][2:]))
    if match["sign"] == "-":
        offset = -offset
    return datetime(
        int(match["year"]),
        MONTH_NAMES.index(match["month"]) + 1,
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        tzinfo=timezone(offset),
    )


def parse_buildinfo_blob(blob: bytes | str) -> ParsedBuildInfo:
    """Scan buildinfo text into a record; unknown lines and fields are ignored."""
    source = ""
    binaries: tuple[str, ...] = ()
    version = ""
    architecture = ""
    distro = ""
    build_date = ZERO_BUILD_DATE
    dependencies: list[str] = []
    warnings: list[DateParseWarning] = []

    for line in decode_blob(blob).splitlines():
        field, delimiter, value = line.partition(FIELD_DELIMITER)
        if not delimiter:
            if DEPENDENCY_MARKER in line:
                dependencies.append("".join(line.split()))
            continue
        if field == "Source":
            source = value
        elif field == "Binary":
            binaries = tuple(value.split())
        elif field == "Version":
            version = value
        elif field == "Build-Architecture":
            architecture = value
        elif field == "Build-Origin":
            distro = value.lower()
        elif field == "Build-Date":
            try:
                build_date = parse_build_date(value)
            except ValueError as exc:
                build_date = ZERO_BUILD_DATE
                warnings.append(DateParseWarning(field=field, value=value, reason=str(exc)))

    record = BuildInfoRecord(
        source=source,
        binaries=binaries,
        version=version,
        architecture=architecture,
        distro=distro,
        build_date=build_date,
        build_dependencies=tuple(dependencies),
    )
    return ParsedBuildInfo(record=record, warnings=tuple(warnings))
