"""
Conversion service that applies the converter core and formats results for the API.
"""
from datetime import datetime, timezone
from typing import Any

from utc_converter import convert, is_daylight_saving
from utc_converter.config_loader import ConverterSettings
from utc_converter.models import ConversionResult, Disambiguation
from utc_converter.timezone_utils import get_zone, zone_abbreviation

DISPLAY_FORMAT = '%A, %B %d, %Y %I:%M %p'


def format_instant_iso(instant: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return instant.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def format_offset(offset) -> str:
    """Render a timedelta offset as +HH:MM."""
    total_minutes = int(offset.total_seconds() // 60)
    sign = '-' if total_minutes < 0 else '+'
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_display(moment: datetime, abbreviation: str) -> str:
    """Human-readable date/time, e.g. 'Wednesday, January 21, 2026 09:07 PM MST'."""
    return f"{moment.strftime(DISPLAY_FORMAT)} {abbreviation}".strip()


class ConversionService:
    """Service for running conversions on behalf of the HTTP layer."""

    def __init__(self, settings: ConverterSettings | None = None):
        self.settings = settings or ConverterSettings()

    def convert(self, time: str, timezone_id: str, direction: str,
                disambiguation: str | None = None) -> dict[str, Any]:
        """
        Convert a time string and build the API response payload.

        Args:
            time: Input time string
            timezone_id: IANA timezone identifier
            direction: 'toLocal' or 'toUTC'
            disambiguation: Optional policy name; defaults to the configured policy

        Returns:
            Response dict (utcISO, localISO, formatted strings, zone facts)

        Raises:
            ConversionError: On any invalid input
        """
        policy = Disambiguation.parse(disambiguation) if disambiguation else self.settings.default_disambiguation
        result = convert(direction, time, timezone_id, policy)
        return self.build_response(result, policy)

    def build_response(self, result: ConversionResult, policy: Disambiguation) -> dict[str, Any]:
        """Format a ConversionResult for JSON output."""
        zone = get_zone(result.timezone)
        local = result.instant.astimezone(zone)
        tz_abbr = zone_abbreviation(zone, result.instant)

        return {
            'utcISO': format_instant_iso(result.instant),
            'localISO': result.wall_time.isoformat(),
            'utcFormatted': format_display(result.instant, 'UTC'),
            'localFormatted': format_display(local, tz_abbr),
            'timezone': result.timezone,
            'tzAbbreviation': tz_abbr,
            'utcOffset': format_offset(result.zoned_time.offset),
            'isDST': is_daylight_saving(result.instant, result.timezone),
            'disambiguation': policy.value,
        }
