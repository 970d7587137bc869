"""
Place-name geocoding service with database caching.
Uses OpenStreetMap Nominatim (free, no API key; 1 request/second fair use).
"""
from datetime import timedelta

import requests
from requests.adapters import HTTPAdapter
from timezonefinder import TimezoneFinder
from urllib3.util.retry import Retry

from flask_app.models import db, GeocodeCache, utcnow
from flask_app.services.utils import normalize_place_name
from utc_converter.config_loader import ConverterSettings

RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

_finder = None


class GeocodingError(Exception):
    """Geocoder could not be reached or answered with an error."""


def build_session(settings: ConverterSettings) -> requests.Session:
    """Create a requests session that retries transient geocoder failures with backoff."""
    retry = Retry(
        total=settings.geocoder_retries,
        backoff_factor=settings.geocoder_backoff,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=frozenset(['GET']),
    )
    session = requests.Session()
    session.headers['User-Agent'] = settings.geocoder_user_agent
    session.mount('https://', HTTPAdapter(max_retries=retry))
    session.mount('http://', HTTPAdapter(max_retries=retry))
    return session


def timezone_for_coordinates(lat, lon):
    """Return the IANA zone containing the coordinates, or None (open ocean)."""
    global _finder
    if _finder is None:
        _finder = TimezoneFinder()
    return _finder.timezone_at(lng=lon, lat=lat)


class GeolocationService:
    """Service to geocode and cache place-name lookups."""

    def __init__(self, settings: ConverterSettings | None = None, session: requests.Session | None = None):
        self.settings = settings or ConverterSettings()
        self.session = session or build_session(self.settings)

    def geocode(self, query):
        """
        Geocode a free-text place name.
        Returns cached result if available, otherwise performs API lookup.

        Args:
            query: Place name as typed by the user

        Returns:
            dict with keys: lat, lon, display_name; None if nothing matched

        Raises:
            GeocodingError: If the geocoder is unreachable after retries
        """
        search_query = self._build_search_query(query)
        if not search_query:
            return None

        # Check cache first
        cached = GeocodeCache.query.filter_by(query_text=search_query).first()
        if cached and not self._is_expired(cached):
            return cached.to_location()

        # Perform API lookup
        try:
            response = self.session.get(
                self.settings.geocoder_url,
                params={'q': search_query, 'format': 'json', 'limit': 1, 'addressdetails': 1},
                timeout=self.settings.geocoder_timeout
            )
            response.raise_for_status()
            results = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"Error geocoding {search_query!r}: {e}")
            # Don't cache failures - allow retry later
            raise GeocodingError(str(e)) from e

        location = None
        if results:
            first = results[0]
            location = {
                'lat': float(first['lat']),
                'lon': float(first['lon']),
                'display_name': first.get('display_name') or query.strip(),
            }

        self._store(search_query, location, existing=cached)
        return location

    def _build_search_query(self, query):
        """Normalize the query and bias bare place names towards US results."""
        normalized = normalize_place_name(query)
        if not normalized:
            return ''
        if 'usa' in normalized or ',' in normalized:
            return normalized
        return f"{normalized}, usa"

    def _is_expired(self, entry):
        ttl_hours = self.settings.cache_ttl_hours
        if ttl_hours <= 0 or entry.created_at is None:
            return False
        return entry.created_at < utcnow() - timedelta(hours=ttl_hours)

    def _store(self, search_query, location, existing=None):
        """Cache a lookup result (None caches a miss)."""
        record = existing or GeocodeCache(query_text=search_query)
        record.found = location is not None
        record.latitude = location['lat'] if location else None
        record.longitude = location['lon'] if location else None
        record.display_name = location['display_name'] if location else None
        record.created_at = utcnow()
        if existing is None:
            db.session.add(record)
        db.session.commit()
