"""
Exception types raised by the conversion core.

Every error is a ValueError so callers that only care about "bad input"
can catch a single type; the HTTP layer maps all of them to a 400.
"""


class ConversionError(ValueError):
    """Base class for conversion failures."""


class FormatError(ConversionError):
    """Input carries the wrong offset vocabulary for the requested direction."""


class ParseError(ConversionError):
    """Input is not a valid ISO-8601 date-time."""


class UnknownZoneError(ConversionError):
    """Timezone identifier is not in the IANA database."""

    def __init__(self, timezone_id):
        self.timezone_id = timezone_id
        super().__init__(f"Unknown timezone: {timezone_id!r}")


class NonexistentLocalTimeError(ConversionError):
    """Wall-clock time falls in a DST gap and the policy is reject."""

    def __init__(self, wall_time, timezone_id):
        self.wall_time = wall_time
        self.timezone_id = timezone_id
        super().__init__(
            f"{wall_time.isoformat()} does not exist in {timezone_id} "
            f"(skipped by a DST transition)"
        )


class AmbiguousLocalTimeError(ConversionError):
    """Wall-clock time falls in a DST overlap and the policy is reject."""

    def __init__(self, wall_time, timezone_id):
        self.wall_time = wall_time
        self.timezone_id = timezone_id
        super().__init__(
            f"{wall_time.isoformat()} is ambiguous in {timezone_id} "
            f"(occurs twice due to a DST transition)"
        )


class InvalidDisambiguationError(ConversionError):
    """Disambiguation policy is not one of the recognized values."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"disambiguation must be one of compatible, earlier, later, reject (got {value!r})"
        )
