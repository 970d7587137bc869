"""
Data models for the conversion core.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from zoneinfo import ZoneInfo

from utc_converter.errors import InvalidDisambiguationError, ParseError


class Disambiguation(str, Enum):
    """Policy for wall-clock times that do not map to exactly one instant."""

    COMPATIBLE = 'compatible'
    EARLIER = 'earlier'
    LATER = 'later'
    REJECT = 'reject'

    @classmethod
    def parse(cls, value) -> 'Disambiguation':
        """
        Coerce a member or its string value to a Disambiguation.

        Raises:
            InvalidDisambiguationError: If value is not a recognized policy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDisambiguationError(value)


class ConversionDirection(str, Enum):
    """Which way a conversion runs."""

    TO_LOCAL = 'toLocal'
    TO_UTC = 'toUTC'


@dataclass(frozen=True)
class ZonedTime:
    """A wall-clock reading in a zone together with the offset that applies to it."""

    wall_time: datetime
    timezone: str
    offset: timedelta
    fold: int = 0

    def __post_init__(self):
        # The UTC equivalent must be representable as a datetime.
        try:
            self.wall_time - self.offset
        except OverflowError as e:
            raise ParseError(
                f"{self.wall_time.isoformat()} in {self.timezone} is outside the supported date range"
            ) from e

    @property
    def instant(self) -> datetime:
        """The equivalent UTC instant."""
        return (self.wall_time - self.offset).replace(tzinfo=timezone.utc)

    def to_datetime(self) -> datetime:
        """Aware datetime in the zone (carries the fold for overlap readings)."""
        return self.wall_time.replace(tzinfo=ZoneInfo(self.timezone), fold=self.fold)

    @classmethod
    def from_instant(cls, instant: datetime, zone: ZoneInfo) -> 'ZonedTime':
        """
        Project an aware datetime into a zone.

        Raises:
            ParseError: If the local reading falls outside the datetime range
        """
        try:
            local = instant.astimezone(zone)
        except OverflowError as e:
            raise ParseError(
                f"{instant.isoformat()} is outside the supported date range in {zone.key}"
            ) from e
        return cls(
            wall_time=local.replace(tzinfo=None, fold=0),
            timezone=zone.key,
            offset=local.utcoffset(),
            fold=local.fold,
        )


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion in either direction."""

    instant: datetime
    zoned_time: ZonedTime
    timezone: str

    @property
    def wall_time(self) -> datetime:
        return self.zoned_time.wall_time
