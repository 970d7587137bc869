"""
Database models for Flask application.
"""
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone

db = SQLAlchemy()


def utcnow():
    """Current UTC time as a naive datetime (SQLite DateTime columns store no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class GeocodeCache(db.Model):
    """Cached Nominatim lookups keyed by normalized query."""
    __tablename__ = 'geocode_cache'

    id = db.Column(db.Integer, primary_key=True)
    query_text = db.Column(db.String(255), nullable=False, unique=True, index=True)
    found = db.Column(db.Boolean, default=True)  # False caches an empty result set
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    display_name = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_location(self):
        """Return the cached result in GeolocationService format, or None for a cached miss."""
        if not self.found:
            return None
        return {
            'lat': self.latitude,
            'lon': self.longitude,
            'display_name': self.display_name,
        }
