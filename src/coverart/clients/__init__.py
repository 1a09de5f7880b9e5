"""
Client modules for the CoverArt Archive API.
"""

from .coverart import CoverArtClient, format_mbid
from .errors import parse_error_page, raise_for_status

__all__ = [
    'CoverArtClient',
    'format_mbid',
    'parse_error_page',
    'raise_for_status',
]
