"""
API routes for time conversion and timezone lookup.
"""
from flask import Blueprint, current_app, jsonify, request
from flask_app.services.conversion_service import ConversionService
from flask_app.services.geolocation_service import GeocodingError, GeolocationService
from flask_app.services.location_service import LocationNotFoundError, LocationService
from flask_app.utils.validators import validate_convert_request
from utc_converter.errors import ConversionError
from utc_converter.timezone_utils import list_timezones

main_bp = Blueprint('main', __name__)


def _settings():
    return current_app.config['CONVERTER_SETTINGS']


@main_bp.route('/api/convert', methods=['POST'])
def api_convert():
    """Convert a time between UTC and a timezone (bidirectional)."""
    data = request.get_json(silent=True) or {}

    errors = validate_convert_request(data)
    if errors:
        return jsonify({'error': errors[0]}), 400

    try:
        result = ConversionService(_settings()).convert(
            data['time'],
            data['timezone'],
            data['direction'],
            data.get('disambiguation')
        )
    except ConversionError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify(result)


@main_bp.route('/api/timezones')
def api_timezones():
    """Return all IANA timezone identifiers."""
    return jsonify(list_timezones())


@main_bp.route('/api/location')
def api_location():
    """Look up the timezone for a free-text place name."""
    query = (request.args.get('q') or '').strip()
    if not query:
        return jsonify({'error': 'Location query required'}), 400

    service = LocationService(GeolocationService(_settings()))
    try:
        return jsonify(service.resolve(query))
    except LocationNotFoundError as e:
        body = {'error': str(e)}
        if e.suggestion:
            body['suggestion'] = e.suggestion
        return jsonify(body), 404
    except GeocodingError:
        return jsonify({'error': 'Geocoding service unavailable'}), 502
