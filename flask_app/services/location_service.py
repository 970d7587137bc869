"""
Resolve free-text place names to IANA timezones.

Single-timezone US states are answered from a local table; everything else
goes through the geocoder and a coordinates-to-zone lookup.
"""
from __future__ import annotations

from typing import Any

from flask_app.services.geolocation_service import GeolocationService, timezone_for_coordinates
from flask_app.services.utils import normalize_place_name, title_case
from utc_converter.errors import UnknownZoneError
from utc_converter.timezone_utils import get_zone, zone_abbreviation

# Arizona is excluded: the Navajo Nation observes DST, so it needs a coordinate lookup.
_STATES_BY_TIMEZONE = {
    'America/Los_Angeles': [
        ('washington', 'wa'), ('california', 'ca'), ('nevada', 'nv'),
    ],
    'America/Denver': [
        ('montana', 'mt'), ('wyoming', 'wy'), ('colorado', 'co'), ('utah', 'ut'),
        ('new mexico', 'nm'),
    ],
    'America/Chicago': [
        ('minnesota', 'mn'), ('wisconsin', 'wi'), ('iowa', 'ia'), ('missouri', 'mo'),
        ('arkansas', 'ar'), ('louisiana', 'la'), ('mississippi', 'ms'), ('alabama', 'al'),
        ('oklahoma', 'ok'),
    ],
    'America/New_York': [
        ('maine', 'me'), ('new hampshire', 'nh'), ('vermont', 'vt'), ('massachusetts', 'ma'),
        ('rhode island', 'ri'), ('connecticut', 'ct'), ('new york', 'ny'), ('new jersey', 'nj'),
        ('pennsylvania', 'pa'), ('delaware', 'de'), ('maryland', 'md'), ('virginia', 'va'),
        ('west virginia', 'wv'), ('ohio', 'oh'), ('north carolina', 'nc'),
        ('south carolina', 'sc'), ('georgia', 'ga'),
    ],
    'Pacific/Honolulu': [
        ('hawaii', 'hi'),
    ],
}


def _build_state_table() -> dict[str, dict[str, str]]:
    table = {}
    for timezone_id, states in _STATES_BY_TIMEZONE.items():
        for name, code in states:
            info = {'timezone': timezone_id, 'display_name': f"{title_case(name)}, United States"}
            table[name] = info
            table[code] = info
    return table


SINGLE_TIMEZONE_STATES = _build_state_table()


class LocationNotFoundError(LookupError):
    """No timezone could be determined for a place name."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.suggestion = suggestion


def match_single_timezone_state(query: str) -> dict[str, str] | None:
    """
    Match a query whose state part names a single-timezone US state.

    Accepts 'Montana', 'MT', 'Montana, USA' and 'Missoula, MT'. A city part
    is folded into the display name.

    Returns:
        dict with keys: timezone, display_name; None if no state matched
    """
    parts = [part.strip() for part in normalize_place_name(query).split(',')]
    parts = [part for part in parts if part]

    for part in reversed(parts):
        state = SINGLE_TIMEZONE_STATES.get(part)
        if state is None:
            continue
        city = next((p for p in parts if p != part and p != 'usa'), None)
        if city is None:
            return dict(state)
        return {
            'timezone': state['timezone'],
            'display_name': f"{title_case(city)}, {state['display_name']}",
        }

    return None


class LocationService:
    """Service for turning place names into timezone information."""

    def __init__(self, geolocation_service: GeolocationService | None = None):
        self.geolocation = geolocation_service or GeolocationService()

    def resolve(self, query: str) -> dict[str, Any]:
        """
        Resolve a place name to its timezone.

        Args:
            query: Free-text place name

        Returns:
            dict with keys: timezone, tzAbbreviation, displayName

        Raises:
            LocationNotFoundError: If the place or its timezone is unknown
            GeocodingError: If the geocoder is unreachable
        """
        state = match_single_timezone_state(query)
        if state:
            print(f"[Optimized] Skipped API call for: {query} -> {state['timezone']}")
            timezone_id = state['timezone']
            display_name = state['display_name']
        else:
            location = self.geolocation.geocode(query)
            if not location:
                raise LocationNotFoundError(
                    'Location not found',
                    suggestion='Try including the state, e.g., "Lincoln, Montana" or "Missoula, MT"'
                )

            timezone_id = timezone_for_coordinates(location['lat'], location['lon'])
            if not timezone_id:
                raise LocationNotFoundError('Could not determine timezone for location')
            display_name = location['display_name']

        try:
            zone = get_zone(timezone_id)
        except UnknownZoneError as e:
            raise LocationNotFoundError('Could not determine timezone for location') from e
        return {
            'timezone': zone.key,
            'tzAbbreviation': zone_abbreviation(zone),
            'displayName': display_name,
        }
