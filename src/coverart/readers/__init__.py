"""
Readers turning CoverArt Archive JSON into model objects.
"""

import json
from typing import IO, Any, Union

from ..core.exceptions import DecodeError
from ..models.entities import Image, Release, Thumbnails
from .identifiers import read_identifier
from .type_tags import read_type_tags
from .thumbnails import ThumbnailsReader, thumbnails_reader
from .image import ImageReader, image_reader
from .release import ReleaseReader, release_reader

Payload = Union[str, bytes, bytearray, IO[str], IO[bytes]]


def read_thumbnails(obj: Any) -> Thumbnails:
    """Decode a Thumbnails object from parsed JSON."""
    return thumbnails_reader.read(obj)


def read_image(obj: Any) -> Image:
    """Decode an Image object from parsed JSON."""
    return image_reader.read(obj)


def read_release(obj: Any) -> Release:
    """Decode a Release object from parsed JSON."""
    return release_reader.read(obj)


def parse_json(payload: Payload) -> Any:
    """
    Parse a JSON document from text, bytes or a file object.

    Raises:
        DecodeError: If the payload is not valid JSON
    """
    if hasattr(payload, "read"):
        payload = payload.read()
    try:
        return json.loads(payload)
    except (ValueError, TypeError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(f"Invalid JSON document: {e}") from e


def decode_release(payload: Payload) -> Release:
    """Parse and decode a release document as returned by the CoverArt Archive."""
    return read_release(parse_json(payload))


def decode_image(payload: Payload) -> Image:
    return read_image(parse_json(payload))


def decode_thumbnails(payload: Payload) -> Thumbnails:
    return read_thumbnails(parse_json(payload))


__all__ = [
    'ThumbnailsReader',
    'ImageReader',
    'ReleaseReader',
    'read_identifier',
    'read_type_tags',
    'read_thumbnails',
    'read_image',
    'read_release',
    'parse_json',
    'decode_release',
    'decode_image',
    'decode_thumbnails',
]
