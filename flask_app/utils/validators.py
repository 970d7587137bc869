"""
Request validation utilities.
"""
from typing import List, Dict, Any

from utc_converter.models import ConversionDirection

VALID_DIRECTIONS = tuple(direction.value for direction in ConversionDirection)


def validate_convert_request(data: Dict[str, Any]) -> List[str]:
    """
    Validate a conversion request body.

    Args:
        data: Parsed JSON body, a dict with 'time', 'timezone', 'direction' and optional 'disambiguation'

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    # Required fields
    if not isinstance(data, dict):
        errors.append('time, timezone, and direction required')
        return errors
    missing = [field for field in ('time', 'timezone', 'direction') if not data.get(field)]
    if missing:
        errors.append('time, timezone, and direction required')
        return errors

    # Validate types
    for field in ('time', 'timezone', 'direction'):
        if not isinstance(data[field], str):
            errors.append(f'{field} must be a string')
    if errors:
        return errors

    # Validate direction
    if data['direction'] not in VALID_DIRECTIONS:
        errors.append('direction must be "toLocal" or "toUTC"')

    disambiguation = data.get('disambiguation')
    if disambiguation is not None and not isinstance(disambiguation, str):
        errors.append('disambiguation must be a string')

    return errors
