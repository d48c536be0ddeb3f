# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Date helpers — tolerant parsing and display formatting.
Pure functions. Unparseable input is "no date", never an error.
"""

import re
from datetime import date, datetime
from typing import Any, Optional

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_MON_RE = re.compile(r"^(\d{4})-([A-Za-z]{3})-(\d{2})$")
_DISPLAY_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")

MONTHS: tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

# Placeholders the data store uses for "no date".
EMPTY_MARKERS: frozenset[str] = frozenset({"", "-", "N/A"})


def to_day(value: date | datetime) -> date:
    """Truncate a date or datetime to day granularity."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_or_none(value: Any) -> Optional[date]:
    """
    Parse ``YYYY-MM-DD`` or ``YYYY-Mon-DD`` (month name case-insensitive).
    Returns None for anything else, including impossible calendar dates.
    """
    if isinstance(value, (date, datetime)):
        return to_day(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text in EMPTY_MARKERS:
        return None

    match = _ISO_RE.match(text)
    if match:
        y, m, d = (int(g) for g in match.groups())
        return _safe_date(y, m, d)

    match = _MON_RE.match(text)
    if match:
        month_name = match.group(2).lower()
        if month_name not in MONTHS:
            return None
        return _safe_date(
            int(match.group(1)), MONTHS.index(month_name) + 1, int(match.group(3))
        )

    return None


def parse_display_date(value: Any) -> Optional[date]:
    """Parse the ``DD/MM/YYYY`` form produced by :func:`format_date`."""
    if not isinstance(value, str):
        return None
    match = _DISPLAY_RE.match(value.strip())
    if not match:
        return None
    d, m, y = (int(g) for g in match.groups())
    return _safe_date(y, m, d)


def format_date(value: Any, placeholder: str = "--") -> str:
    """Render as ``DD/MM/YYYY``; ``placeholder`` when absent or unparseable."""
    parsed = parse_date_or_none(value)
    if parsed is None:
        return placeholder
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year}"


def format_date_long(value: Any) -> str:
    return format_date(value, placeholder="N/A")


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if end is earlier)."""
    return (to_day(end) - to_day(start)).days
