import unittest
from datetime import datetime, timedelta, timezone

from utc_converter import (
    AmbiguousLocalTimeError,
    ConversionDirection,
    Disambiguation,
    FormatError,
    InvalidDisambiguationError,
    NonexistentLocalTimeError,
    ParseError,
    UnknownZoneError,
    convert,
    convert_to_local,
    convert_to_utc,
    to_instant_zoned,
    to_local_zoned,
)


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class ConvertToLocalTests(unittest.TestCase):
    def test_converts_utc_instant_to_local_wall_time(self):
        result = convert_to_local('2025-01-15T12:00:00Z', 'America/New_York')
        self.assertEqual(result.wall_time.isoformat(), '2025-01-15T07:00:00')
        self.assertEqual(result.instant, _utc(2025, 1, 15, 12))
        self.assertEqual(result.timezone, 'America/New_York')
        self.assertEqual(result.zoned_time.offset, timedelta(hours=-5))

    def test_offset_input_is_honoured(self):
        result = convert_to_local('2025-07-01T12:00:00+05:30', 'Europe/London')
        self.assertEqual(result.instant, _utc(2025, 7, 1, 6, 30))
        self.assertEqual(result.wall_time, datetime(2025, 7, 1, 7, 30))

    def test_missing_offset_is_rejected(self):
        with self.assertRaises(FormatError):
            convert_to_local('2025-07-01T12:30:00', 'America/New_York')

    def test_unknown_zone(self):
        with self.assertRaises(UnknownZoneError):
            convert_to_local('2025-07-01T12:30:00Z', 'Mars/Olympus_Mons')

    def test_timezone_identifier_is_canonicalized(self):
        result = convert_to_local('2025-07-01T12:30:00Z', 'america/denver')
        self.assertEqual(result.timezone, 'America/Denver')

    def test_instants_inside_transitions_never_fail(self):
        # Every 15 minutes across both 2025 New York transitions.
        for start in (_utc(2025, 3, 9, 5), _utc(2025, 11, 2, 4)):
            for step in range(16):
                instant = start + timedelta(minutes=15 * step)
                zoned = to_local_zoned(instant.isoformat(), 'America/New_York')
                self.assertEqual(zoned.instant, instant)

    def test_second_occurrence_in_overlap_carries_fold(self):
        zoned = to_local_zoned('2025-11-02T06:30:00Z', 'America/New_York')
        self.assertEqual(zoned.wall_time, datetime(2025, 11, 2, 1, 30))
        self.assertEqual(zoned.offset, timedelta(hours=-5))
        self.assertEqual(zoned.fold, 1)
        self.assertEqual(zoned.to_datetime().utcoffset(), timedelta(hours=-5))


class ConvertToUtcTests(unittest.TestCase):
    def test_converts_local_time_respecting_dst(self):
        result = convert_to_utc('2025-07-01T12:30:00', 'America/New_York', 'reject')
        self.assertEqual(result.instant, _utc(2025, 7, 1, 16, 30))

    def test_date_only_input_is_midnight(self):
        result = convert_to_utc('2025-07-01', 'America/New_York', 'reject')
        self.assertEqual(result.instant, _utc(2025, 7, 1, 4))

    def test_offset_input_is_rejected(self):
        with self.assertRaises(FormatError):
            convert_to_utc('2025-07-01T12:30:00Z', 'America/New_York', 'reject')

    def test_malformed_input(self):
        with self.assertRaises(ParseError):
            convert_to_utc('2025-07-01T25:00:00', 'America/New_York')

    def test_invalid_disambiguation(self):
        with self.assertRaises(InvalidDisambiguationError):
            convert_to_utc('2025-07-01T12:30:00', 'America/New_York', 'nearest')

    def test_disambiguation_is_checked_before_input(self):
        with self.assertRaises(InvalidDisambiguationError):
            convert_to_utc('garbage', 'Not/AZone', 'sometimes')

    def test_london_and_kolkata(self):
        self.assertEqual(convert_to_utc('2025-01-15T12:00:00', 'Europe/London', 'reject').instant,
                         _utc(2025, 1, 15, 12))
        self.assertEqual(convert_to_utc('2025-07-01T12:00:00', 'Europe/London', 'reject').instant,
                         _utc(2025, 7, 1, 11))
        self.assertEqual(convert_to_utc('2025-07-01T12:00:00', 'Asia/Kolkata', 'reject').instant,
                         _utc(2025, 7, 1, 6, 30))

    def test_southern_hemisphere(self):
        self.assertEqual(convert_to_utc('2025-01-15T12:00:00', 'Australia/Sydney', 'reject').instant,
                         _utc(2025, 1, 15, 1))
        self.assertEqual(convert_to_utc('2025-07-15T12:00:00', 'Australia/Sydney', 'reject').instant,
                         _utc(2025, 7, 15, 2))


class DateRangeTests(unittest.TestCase):
    def test_instant_before_year_one_in_utc(self):
        with self.assertRaises(ParseError):
            convert_to_local('0001-01-01T00:00:00+01:00', 'UTC')

    def test_local_reading_past_year_9999(self):
        with self.assertRaises(ParseError):
            convert_to_local('9999-12-31T23:00:00Z', 'Asia/Tokyo')

    def test_wall_clock_whose_instant_is_past_year_9999(self):
        for policy in Disambiguation:
            with self.assertRaises(ParseError):
                convert_to_utc('9999-12-31T23:00:00', 'America/New_York', policy)

    def test_wall_clock_whose_instant_is_before_year_one(self):
        with self.assertRaises(ParseError):
            convert_to_utc('0001-01-01T00:30:00', 'Asia/Tokyo')

    def test_edges_that_still_fit(self):
        self.assertEqual(convert_to_local('9999-12-31T23:59:59Z', 'UTC').instant,
                         _utc(9999, 12, 31, 23, 59, 59))
        self.assertEqual(convert_to_utc('9999-12-31T12:00:00', 'America/New_York').instant,
                         _utc(9999, 12, 31, 17))


class GapTests(unittest.TestCase):
    WALL = '2025-03-09T02:30:00'
    ZONE = 'America/New_York'

    def test_reject_raises_nonexistent(self):
        with self.assertRaises(NonexistentLocalTimeError):
            convert_to_utc(self.WALL, self.ZONE, 'reject')

    def test_compatible_shifts_forward_by_gap(self):
        zoned = to_instant_zoned(self.WALL, self.ZONE, Disambiguation.COMPATIBLE)
        self.assertEqual(zoned.instant, _utc(2025, 3, 9, 7, 30))
        self.assertEqual(zoned.wall_time, datetime(2025, 3, 9, 3, 30))
        self.assertEqual(zoned.offset, timedelta(hours=-4))

    def test_earlier_and_later_behave_like_compatible(self):
        compatible = convert_to_utc(self.WALL, self.ZONE, 'compatible')
        for policy in ('earlier', 'later'):
            self.assertEqual(convert_to_utc(self.WALL, self.ZONE, policy), compatible)

    def test_southern_hemisphere_gap(self):
        # Sydney springs forward 02:00 -> 03:00 on 2025-10-05.
        with self.assertRaises(NonexistentLocalTimeError):
            convert_to_utc('2025-10-05T02:15:00', 'Australia/Sydney', 'reject')
        zoned = to_instant_zoned('2025-10-05T02:15:00', 'Australia/Sydney', 'compatible')
        self.assertEqual(zoned.wall_time, datetime(2025, 10, 5, 3, 15))


class OverlapTests(unittest.TestCase):
    WALL = '2025-11-02T01:30:00'
    ZONE = 'America/New_York'

    def test_earlier_and_later(self):
        earlier = convert_to_utc(self.WALL, self.ZONE, 'earlier')
        later = convert_to_utc(self.WALL, self.ZONE, 'later')
        self.assertEqual(earlier.instant, _utc(2025, 11, 2, 5, 30))
        self.assertEqual(later.instant, _utc(2025, 11, 2, 6, 30))
        self.assertEqual(earlier.zoned_time.offset, timedelta(hours=-4))
        self.assertEqual(later.zoned_time.offset, timedelta(hours=-5))
        self.assertEqual(earlier.wall_time, later.wall_time)

    def test_compatible_matches_earlier(self):
        self.assertEqual(convert_to_utc(self.WALL, self.ZONE, 'compatible').instant,
                         _utc(2025, 11, 2, 5, 30))
        self.assertEqual(convert_to_utc(self.WALL, self.ZONE).instant,
                         _utc(2025, 11, 2, 5, 30))

    def test_reject_raises_ambiguous(self):
        with self.assertRaises(AmbiguousLocalTimeError):
            convert_to_utc(self.WALL, self.ZONE, Disambiguation.REJECT)


class PropertyTests(unittest.TestCase):
    ZONES = ('America/New_York', 'Europe/London', 'Australia/Sydney', 'Asia/Kolkata', 'America/Denver')

    def test_round_trip_outside_transitions(self):
        start = _utc(2025, 1, 1, 0, 17)
        for zone in self.ZONES:
            for day in range(0, 365, 11):
                instant = start + timedelta(days=day, hours=day % 24)
                local = convert_to_local(instant.isoformat(), zone)
                back = convert_to_utc(local.wall_time.isoformat(), zone, 'compatible')
                if back.instant != instant:
                    # Only the repeated hour may differ, and only by choosing the other fold.
                    self.assertEqual(local.zoned_time.fold, 1)
                    continue
                self.assertEqual(back.instant, instant)

    def test_idempotent(self):
        first = convert(ConversionDirection.TO_UTC, '2025-11-02T01:30:00', 'America/New_York', 'later')
        second = convert(ConversionDirection.TO_UTC, '2025-11-02T01:30:00', 'America/New_York', 'later')
        self.assertEqual(first, second)

    def test_convert_dispatches_on_direction(self):
        self.assertEqual(convert('toLocal', '2026-01-21T21:07:00Z', 'America/Denver').wall_time,
                         datetime(2026, 1, 21, 14, 7))
        self.assertEqual(convert('toUTC', '2026-01-21T21:07', 'America/Denver').instant,
                         _utc(2026, 1, 22, 4, 7))


if __name__ == '__main__':
    unittest.main()
