"""
coverart - a typed client for the CoverArt Archive.
"""

from .core.config import PROJECT_VERSION as __version__
from .core.exceptions import (
    CoverArtError,
    DecodeError,
    MissingFieldError,
    MalformedIdentifierError,
    MalformedValueError,
    PropertyDecodeError,
    HttpError,
    ImageTooLargeError,
    NetworkError,
)
from .models import (
    CoverArtType,
    CoverArtTypeSet,
    ImageSize,
    CoverArtImage,
    Thumbnails,
    Image,
    Release,
)
from .readers import decode_release, read_release, read_image, read_thumbnails
from .clients import CoverArtClient

__all__ = [
    '__version__',
    'CoverArtClient',
    'CoverArtError',
    'DecodeError',
    'MissingFieldError',
    'MalformedIdentifierError',
    'MalformedValueError',
    'PropertyDecodeError',
    'HttpError',
    'ImageTooLargeError',
    'NetworkError',
    'CoverArtType',
    'CoverArtTypeSet',
    'ImageSize',
    'CoverArtImage',
    'Thumbnails',
    'Image',
    'Release',
    'decode_release',
    'read_release',
    'read_image',
    'read_thumbnails',
]
