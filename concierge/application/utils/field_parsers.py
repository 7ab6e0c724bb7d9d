from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}(?=$|\s|[.,;!?])")
NUMBER_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")
HOUR_UNIT_PATTERN = re.compile(r"hour|hr|(?<![a-z])h\b", re.IGNORECASE)
MINUTE_UNIT_PATTERN = re.compile(r"minute|min|(?<![a-z])m\b", re.IGNORECASE)

# Unit-less numbers up to this value are read as hours ("2" -> 120 minutes).
BARE_HOURS_MAX = 6
MIN_NAME_LENGTH = 2


def parse_name(text: str) -> str | None:
    """Title-case each whitespace-separated token. None when the input is too short."""
    trimmed = text.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        return None
    return " ".join(token[:1].upper() + token[1:].lower() for token in trimmed.split())


def first_name(name: str) -> str:
    parts = name.split()
    return parts[0] if parts else name


def parse_email(text: str) -> str | None:
    match = EMAIL_PATTERN.search(text.strip())
    return match.group(0).lower() if match else None


def parse_duration_minutes(text: str) -> int | None:
    """
    Extract a meeting length in minutes.

    An hour unit without a minute unit multiplies by 60, and so does a bare
    number up to BARE_HOURS_MAX. Everything else is taken as minutes.
    """
    match = NUMBER_PATTERN.search(text)
    if not match:
        return None
    value = float(match.group(1))
    if value <= 0:
        return None

    mentions_hours = bool(HOUR_UNIT_PATTERN.search(text))
    mentions_minutes = bool(MINUTE_UNIT_PATTERN.search(text))

    if mentions_hours and not mentions_minutes:
        return _round_half_up(value * 60)
    if not mentions_hours and not mentions_minutes and value <= BARE_HOURS_MAX:
        return _round_half_up(value * 60)
    minutes = _round_half_up(value)
    return minutes or None


def _round_half_up(value: float) -> int:
    return int(value + 0.5)
