"""
Data models for the CoverArt Archive client.
"""

from .types import CoverArtType, CoverArtTypeSet, KNOWN_TYPE_TAGS, add_type_tag
from .images import ImageSize, CoverArtImage
from .entities import JsonValue, Thumbnails, Image, Release

__all__ = [
    'CoverArtType',
    'CoverArtTypeSet',
    'KNOWN_TYPE_TAGS',
    'add_type_tag',
    'ImageSize',
    'CoverArtImage',
    'JsonValue',
    'Thumbnails',
    'Image',
    'Release',
]
