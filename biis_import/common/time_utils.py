"""ISO-8601 parsing and UTC helpers."""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

# Calendar dates with optional reduced precision: YYYY, YYYY-MM, YYYY-MM-DD.
_CALENDAR_DATE_RE = re.compile(r"^([0-9]{4})(?:-([0-9]{2})(?:-([0-9]{2}))?)?$")


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def _parse_local_datetime(text: str, value: str) -> datetime:
    if "T" not in text or not text.isascii():
        raise ValueError(f"Invalid ISO-8601 date-time: {value!r}")
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        raise ValueError(f"UTC offset not allowed in local date-time: {value!r}")
    return parsed


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 calendar date or date-time into a ``date``.

    Reduced precision fills in the first month/day, a date-time contributes
    only its date part. Digits must be ASCII and date-times carry no UTC
    offset. Anything else raises ``ValueError``.
    """
    text = value.strip()
    match = _CALENDAR_DATE_RE.match(text)
    if match:
        year, month, day = match.groups()
        return date(int(year), int(month or 1), int(day or 1))
    return _parse_local_datetime(text, value).date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 local date-time; a bare calendar date means midnight."""
    text = value.strip()
    if _CALENDAR_DATE_RE.match(text):
        parsed = parse_iso_date(text)
        return datetime(parsed.year, parsed.month, parsed.day)
    return _parse_local_datetime(text, value)
