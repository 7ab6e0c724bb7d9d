from __future__ import annotations

import re
from datetime import date, datetime, time

from dateutil import parser as dateutil_parser

# Tried in order against the whole input. Formats without a year borrow it from today.
DATE_FORMATS = (
    ("%Y-%m-%d", True),  # 2026-10-21
    ("%m/%d/%Y", True),  # 10/21/2026
    ("%B %d, %Y", True),  # October 21, 2026
    ("%B %d %Y", True),  # October 21 2026
    ("%b %d, %Y", True),  # Oct 21, 2026
    ("%b %d %Y", True),  # Oct 21 2026
    ("%B %d", False),  # October 21
    ("%b %d", False),  # Oct 21
    ("%A, %B %d", False),  # Wednesday, October 21
    ("%A %B %d", False),  # Wednesday October 21
)

TIME_PATTERN = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(am|pm|a\.m\.|p\.m\.)?", re.IGNORECASE)

# Bare hours below this are read as afternoon/evening ("2" -> 14:00).
AFTERNOON_CUTOFF_HOUR = 8


def parse_preferred_date(text: str, reference_date: date | None = None) -> str | None:
    """Parse a calendar date from text. Returns YYYY-MM-DD, or None when unrecognized or in the past."""
    if reference_date is None:
        reference_date = date.today()

    trimmed = text.strip()
    if not trimmed:
        return None

    for fmt, has_year in DATE_FORMATS:
        parsed = _strptime(trimmed, fmt, has_year, reference_date.year)
        if parsed and parsed >= reference_date:
            return parsed.isoformat()

    try:
        fallback = _parse_calendar_date(trimmed, reference_date)
    except (ValueError, OverflowError):
        return None
    if fallback and fallback >= reference_date:
        return fallback.isoformat()
    return None


def parse_preferred_time(text: str) -> str | None:
    """Parse a start time from text. Returns zero-padded 24h HH:MM or None."""
    match = TIME_PATTERN.search(text)
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2) or "0")
    meridiem = (match.group(3) or "").lower()

    if hour > 24 or minute >= 60:
        return None

    if "p" in meridiem and hour < 12:
        hour += 12
    elif "a" in meridiem and hour == 12:
        hour = 0

    if not meridiem and hour < AFTERNOON_CUTOFF_HOUR:
        hour += 12

    if hour >= 24:
        return None

    return f"{hour:02d}:{minute:02d}"


def _strptime(text: str, fmt: str, has_year: bool, year: int) -> date | None:
    try:
        if has_year:
            return datetime.strptime(text, fmt).date()
        # Append the year so Feb 29 resolves against the reference year, not 1900.
        return datetime.strptime(f"{text} {year}", f"{fmt} %Y").date()
    except ValueError:
        return None


def _parse_calendar_date(text: str, reference_date: date) -> date | None:
    """
    Generic parse that only counts when the text names a month and a day.

    Parsing twice against defaults with different months and days exposes
    inputs like "3pm" or "30" that leave either part to the default.
    """
    primary = dateutil_parser.parse(text, default=datetime.combine(reference_date, time.min))
    alternate_default = datetime(
        reference_date.year,
        reference_date.month % 12 + 1,
        2 if reference_date.day == 1 else 1,
    )
    alternate = dateutil_parser.parse(text, default=alternate_default)
    if (primary.month, primary.day) != (alternate.month, alternate.day):
        return None
    return primary.date()
