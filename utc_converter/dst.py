"""
Daylight saving classification.

The zone's own DST metadata is not consulted. Instead the offsets in effect
at local noon on January 15 and July 15 of the instant's local year are
compared: if they match the zone has no seasonal change that year, otherwise
the smaller one is standard time and anything else counts as daylight time.
Defining standard as the smaller offset covers both hemispheres without
looking at the calendar season.

Known approximation: a zone that changes rules mid-year, or an instant that
falls between a transition and the 15th of that month, is classified by the
two snapshots rather than the zone's actual rules. Callers rely on this exact
behaviour, so it is kept.
"""

from datetime import datetime

from utc_converter.errors import ParseError
from utc_converter.models import ZonedTime
from utc_converter.timezone_utils import get_zone

REFERENCE_DAY = 15
REFERENCE_HOUR = 12


def _reference_offset(year, month, zone):
    return datetime(year, month, REFERENCE_DAY, REFERENCE_HOUR, tzinfo=zone).utcoffset()


def is_daylight_saving(instant, timezone_id: str) -> bool:
    """
    Whether the instant observes the zone's non-standard offset.

    Args:
        instant: Aware datetime or ZonedTime
        timezone_id: IANA timezone identifier

    Returns:
        True if the instant's offset differs from the zone's standard offset

    Raises:
        UnknownZoneError: If the identifier is not recognized
        ParseError: If the local reading falls outside the datetime range
        TypeError: If instant is a naive datetime
    """
    if isinstance(instant, ZonedTime):
        instant = instant.instant
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise TypeError('instant must be a timezone-aware datetime')

    zone = get_zone(timezone_id)
    try:
        local = instant.astimezone(zone)
    except OverflowError as e:
        raise ParseError(f"{instant.isoformat()} is outside the supported date range in {zone.key}") from e

    january = _reference_offset(local.year, 1, zone)
    july = _reference_offset(local.year, 7, zone)
    if january == july:
        return False

    standard = min(january, july)
    return local.utcoffset() != standard
