"""
Configuration loader for the UTC Time Converter.

Supports loading configuration from:
1. config.ini file (recommended)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from dataclasses import dataclass

from utc_converter.errors import InvalidDisambiguationError
from utc_converter.models import Disambiguation


@dataclass
class ConverterSettings:
    """Settings for the conversion API and its location lookups."""

    # Policy applied when a request does not name one
    default_disambiguation: Disambiguation = Disambiguation.COMPATIBLE

    # Nominatim geocoder
    geocoder_url: str = 'https://nominatim.openstreetmap.org/search'
    geocoder_user_agent: str = 'UTCTimeConverter/1.0 (educational project)'
    geocoder_timeout: float = 5.0
    geocoder_retries: int = 3
    geocoder_backoff: float = 0.5

    # Geocode cache lifetime; 0 keeps entries forever
    cache_ttl_hours: int = 24 * 30


def _parse_disambiguation(value: str) -> Disambiguation:
    try:
        return Disambiguation.parse(value)
    except InvalidDisambiguationError as e:
        raise ValueError(f"Invalid default disambiguation: {e}") from e


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_settings(self) -> ConverterSettings:
        """
        Get converter settings.

        Returns:
            ConverterSettings with configured values

        Raises:
            ValueError: If a value is present but invalid
        """
        defaults = ConverterSettings()
        settings = ConverterSettings()

        # Try config file first
        if self.config:
            settings.default_disambiguation = _parse_disambiguation(
                self.config.get('Settings', 'default_disambiguation',
                                fallback=defaults.default_disambiguation.value)
            )
            settings.cache_ttl_hours = self.config.getint('Settings', 'cache_ttl_hours',
                                                          fallback=defaults.cache_ttl_hours)
            settings.geocoder_url = self.config.get('Geocoder', 'url', fallback=defaults.geocoder_url)
            settings.geocoder_user_agent = self.config.get('Geocoder', 'user_agent',
                                                           fallback=defaults.geocoder_user_agent)
            settings.geocoder_timeout = self.config.getfloat('Geocoder', 'timeout',
                                                             fallback=defaults.geocoder_timeout)
            settings.geocoder_retries = self.config.getint('Geocoder', 'retries',
                                                           fallback=defaults.geocoder_retries)
            settings.geocoder_backoff = self.config.getfloat('Geocoder', 'backoff',
                                                             fallback=defaults.geocoder_backoff)
            return settings

        # Try environment variables
        settings.default_disambiguation = _parse_disambiguation(
            os.getenv('CONVERTER_DEFAULT_DISAMBIGUATION', defaults.default_disambiguation.value)
        )
        settings.geocoder_url = os.getenv('CONVERTER_GEOCODER_URL', defaults.geocoder_url)
        settings.geocoder_user_agent = os.getenv('CONVERTER_GEOCODER_USER_AGENT', defaults.geocoder_user_agent)
        settings.geocoder_timeout = float(os.getenv('CONVERTER_GEOCODER_TIMEOUT', str(defaults.geocoder_timeout)))
        settings.geocoder_retries = int(os.getenv('CONVERTER_GEOCODER_RETRIES', str(defaults.geocoder_retries)))
        settings.geocoder_backoff = float(os.getenv('CONVERTER_GEOCODER_BACKOFF', str(defaults.geocoder_backoff)))
        settings.cache_ttl_hours = int(os.getenv('CONVERTER_CACHE_TTL_HOURS', str(defaults.cache_ttl_hours)))

        return settings


def load_settings(config_file: str = "config.ini") -> ConverterSettings:
    """
    Convenience function to load settings from file or environment.

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_settings()
