"""
Timezone lookups shared across the app.
"""

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from utc_converter.errors import UnknownZoneError

# Served when the platform has no enumerable zone database.
FALLBACK_TIMEZONES = (
    'UTC',
    'America/New_York',
    'America/Chicago',
    'America/Denver',
    'America/Phoenix',
    'America/Los_Angeles',
    'America/Anchorage',
    'Pacific/Honolulu',
    'Europe/London',
    'Europe/Paris',
    'Europe/Berlin',
    'Asia/Kolkata',
    'Asia/Shanghai',
    'Asia/Tokyo',
    'Australia/Sydney',
)


@lru_cache(maxsize=1)
def _zones_by_lowercase_name() -> dict[str, str]:
    return {name.lower(): name for name in available_timezones()}


def list_timezones() -> list[str]:
    """Return all IANA timezone identifiers, sorted."""
    zones = sorted(_zones_by_lowercase_name().values())
    return zones or list(FALLBACK_TIMEZONES)


def get_zone(timezone_id: str) -> ZoneInfo:
    """
    Resolve an IANA identifier to a ZoneInfo.

    Matching against the available zones is case-insensitive, so
    'america/denver' resolves to 'America/Denver'.

    Raises:
        UnknownZoneError: If the identifier is not recognized
    """
    if not isinstance(timezone_id, str) or not timezone_id.strip():
        raise UnknownZoneError(timezone_id)

    name = timezone_id.strip()
    canonical = _zones_by_lowercase_name().get(name.lower())
    if canonical is not None:
        return ZoneInfo(canonical)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise UnknownZoneError(timezone_id) from None


def zone_abbreviation(zone: ZoneInfo, at: datetime | None = None) -> str:
    """Short zone name (EST, AEDT, +0530, ...) in effect at the given instant."""
    moment = at.astimezone(zone) if at is not None else datetime.now(zone)
    return moment.tzname() or ''
