"""
Conversion between UTC instants and wall-clock times in a named zone.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from utc_converter.errors import AmbiguousLocalTimeError, NonexistentLocalTimeError, ParseError
from utc_converter.formats import parse_instant_strict, parse_wall_clock_strict
from utc_converter.models import ConversionDirection, ConversionResult, Disambiguation, ZonedTime
from utc_converter.timezone_utils import get_zone


def to_local_zoned(instant_string: str, timezone_id: str) -> ZonedTime:
    """
    Project an instant into a zone.

    Args:
        instant_string: ISO-8601 instant with a Z or numeric offset
        timezone_id: IANA timezone identifier

    Returns:
        ZonedTime for the instant in that zone

    Raises:
        FormatError, ParseError, UnknownZoneError
    """
    instant = parse_instant_strict(instant_string)
    zone = get_zone(timezone_id)
    return ZonedTime.from_instant(instant, zone)


def to_instant_zoned(wall_clock_string: str, timezone_id: str, policy) -> ZonedTime:
    """
    Resolve a wall-clock time in a zone to the instant it denotes.

    Args:
        wall_clock_string: ISO-8601 local date-time (or date) without offset
        timezone_id: IANA timezone identifier
        policy: Disambiguation member or its string value

    Returns:
        ZonedTime carrying the chosen offset

    Raises:
        InvalidDisambiguationError, FormatError, ParseError, UnknownZoneError,
        NonexistentLocalTimeError, AmbiguousLocalTimeError
    """
    policy = Disambiguation.parse(policy)
    wall_time = parse_wall_clock_strict(wall_clock_string)
    zone = get_zone(timezone_id)
    return resolve_wall_clock(wall_time, zone, policy)


def resolve_wall_clock(wall_time: datetime, zone: ZoneInfo, policy: Disambiguation) -> ZonedTime:
    """
    Pick the offset for a naive wall-clock time in a zone.

    Both folds are tried. When they agree the reading is unambiguous. When
    they disagree the reading either repeats (overlap: the fold=0 reading
    survives a round trip through UTC) or was skipped (gap: it does not).

    For a gap, every non-reject policy moves the reading forward by the
    length of the gap. fold=0 carries the pre-transition offset, so its UTC
    equivalent lands just past the transition.

    Raises:
        AmbiguousLocalTimeError, NonexistentLocalTimeError, ParseError
    """
    try:
        return _resolve(wall_time, zone, policy)
    except OverflowError as e:
        raise ParseError(f"{wall_time.isoformat()} in {zone.key} is outside the supported date range") from e


def _resolve(wall_time, zone, policy):
    first = wall_time.replace(tzinfo=zone, fold=0)
    second = wall_time.replace(tzinfo=zone, fold=1)

    if first.utcoffset() == second.utcoffset():
        return ZonedTime.from_instant(first, zone)

    round_trip = first.astimezone(timezone.utc).astimezone(zone)
    if round_trip.replace(tzinfo=None) == wall_time:
        # overlap
        if policy is Disambiguation.REJECT:
            raise AmbiguousLocalTimeError(wall_time, zone.key)
        chosen = second if policy is Disambiguation.LATER else first
        return ZonedTime.from_instant(chosen.astimezone(timezone.utc), zone)

    # gap
    if policy is Disambiguation.REJECT:
        raise NonexistentLocalTimeError(wall_time, zone.key)
    return ZonedTime.from_instant(first.astimezone(timezone.utc), zone)


def convert_to_local(time: str, timezone_id: str) -> ConversionResult:
    """Convert a UTC (or offset) instant to wall-clock time in a zone."""
    zoned = to_local_zoned(time, timezone_id)
    return ConversionResult(instant=zoned.instant, zoned_time=zoned, timezone=zoned.timezone)


def convert_to_utc(time: str, timezone_id: str,
                   disambiguation=Disambiguation.COMPATIBLE) -> ConversionResult:
    """Convert a wall-clock time in a zone to its UTC instant."""
    zoned = to_instant_zoned(time, timezone_id, disambiguation)
    return ConversionResult(instant=zoned.instant, zoned_time=zoned, timezone=zoned.timezone)


def convert(direction, time: str, timezone_id: str,
            disambiguation=Disambiguation.COMPATIBLE) -> ConversionResult:
    """Dispatch to convert_to_local or convert_to_utc by direction."""
    if ConversionDirection(direction) is ConversionDirection.TO_LOCAL:
        return convert_to_local(time, timezone_id)
    return convert_to_utc(time, timezone_id, disambiguation)
