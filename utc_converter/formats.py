"""
Strict input parsing for both conversion directions.

An instant must say which offset it was written in, and a wall-clock time
must not. Mixing the two up silently shifts the result by the zone offset,
so the check is done lexically before any calendar parsing.
"""

import re
from datetime import date, datetime, time, timezone

from utc_converter.errors import FormatError, ParseError
from utc_converter.models import ConversionDirection

OFFSET_RE = re.compile(r'(?:[zZ]|[+-]\d{2}:?\d{2})$')
DATE_ONLY_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')

_COMPACT_OFFSET_RE = re.compile(r'([+-]\d{2})(\d{2})$')
_LONG_FRACTION_RE = re.compile(r'(\.\d{6})\d+')

MISSING_OFFSET_MESSAGE = 'missing offset or Z for instant input'
UNEXPECTED_OFFSET_MESSAGE = 'unexpected offset or Z for local input'


def has_offset(value: str) -> bool:
    """True if the string ends in Z or a numeric UTC offset."""
    return OFFSET_RE.search(value.strip()) is not None


def validate_format(direction, value: str) -> None:
    """
    Check that the input's offset vocabulary matches the direction.

    Args:
        direction: ConversionDirection (or its string value)
        value: Raw input string

    Raises:
        FormatError: If an instant lacks an offset or a local time carries one
        ParseError: If value is not a string
    """
    if not isinstance(value, str):
        raise ParseError(f"time must be a string (got {type(value).__name__})")

    direction = ConversionDirection(direction)
    if direction is ConversionDirection.TO_LOCAL and not has_offset(value):
        raise FormatError(MISSING_OFFSET_MESSAGE)
    if direction is ConversionDirection.TO_UTC and has_offset(value):
        raise FormatError(UNEXPECTED_OFFSET_MESSAGE)


def _normalize_iso(value: str) -> str:
    value = _LONG_FRACTION_RE.sub(r'\1', value)
    if value[-1:] in ('z', 'Z'):
        return value[:-1] + '+00:00'
    return _COMPACT_OFFSET_RE.sub(r'\1:\2', value)


def parse_instant_strict(value: str) -> datetime:
    """
    Parse an ISO-8601 instant that carries an explicit offset or Z.

    Returns:
        Aware datetime normalized to UTC

    Raises:
        FormatError: If no offset or Z is present
        ParseError: If the string is not a valid date-time
    """
    validate_format(ConversionDirection.TO_LOCAL, value)
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(_normalize_iso(text))
    except ValueError as e:
        raise ParseError(f"Invalid instant {value!r}: {e}") from e

    if parsed.tzinfo is None:
        raise ParseError(f"Invalid instant {value!r}: offset could not be read")
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ParseError(f"Instant {value!r} is outside the supported date range") from e


def parse_wall_clock_strict(value: str) -> datetime:
    """
    Parse a naive ISO-8601 date-time (or bare date, read as midnight).

    Returns:
        Naive datetime

    Raises:
        FormatError: If an offset or Z is present
        ParseError: If the string is not a valid date-time
    """
    validate_format(ConversionDirection.TO_UTC, value)
    text = value.strip()
    try:
        if DATE_ONLY_RE.match(text):
            return datetime.combine(date.fromisoformat(text), time())
        parsed = datetime.fromisoformat(_LONG_FRACTION_RE.sub(r'\1', text))
    except ValueError as e:
        raise ParseError(f"Invalid local time {value!r}: {e}") from e

    if parsed.tzinfo is not None:
        raise FormatError(UNEXPECTED_OFFSET_MESSAGE)
    return parsed
