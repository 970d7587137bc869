"""
Shared utility functions for service modules.
"""
from typing import Any


def normalize_place_name(value: Any) -> str:
    """Normalize a place query for case-insensitive lookup and caching.

    Strips whitespace, lowercases, and collapses internal whitespace runs.
    """
    if not value:
        return ''
    return ' '.join(str(value).strip().lower().split())


def title_case(value: str) -> str:
    """Capitalize each word ('new york' -> 'New York')."""
    return ' '.join(word[:1].upper() + word[1:] for word in value.split(' '))
