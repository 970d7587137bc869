"""
UTC Time Converter

Converts between UTC instants and wall-clock times in IANA timezones,
with explicit handling of daylight saving gaps and overlaps.
"""

from utc_converter.conversion import (
    convert,
    convert_to_local,
    convert_to_utc,
    resolve_wall_clock,
    to_instant_zoned,
    to_local_zoned,
)
from utc_converter.dst import is_daylight_saving
from utc_converter.errors import (
    AmbiguousLocalTimeError,
    ConversionError,
    FormatError,
    InvalidDisambiguationError,
    NonexistentLocalTimeError,
    ParseError,
    UnknownZoneError,
)
from utc_converter.models import ConversionDirection, ConversionResult, Disambiguation, ZonedTime

__version__ = "0.1.0"
__all__ = [
    "convert",
    "convert_to_local",
    "convert_to_utc",
    "resolve_wall_clock",
    "to_instant_zoned",
    "to_local_zoned",
    "is_daylight_saving",
    "ConversionDirection",
    "ConversionResult",
    "Disambiguation",
    "ZonedTime",
    "ConversionError",
    "FormatError",
    "ParseError",
    "UnknownZoneError",
    "NonexistentLocalTimeError",
    "AmbiguousLocalTimeError",
    "InvalidDisambiguationError",
]
