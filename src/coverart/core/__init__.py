"""
Core module for the CoverArt Archive client.
Contains configuration, exceptions, logging setup, and validation.
"""

from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise, check_dependencies

__all__ = [
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'check_dependencies',
    'CoverArtError',
    'ConfigurationError',
    'DecodeError',
    'MissingFieldError',
    'MalformedIdentifierError',
    'MalformedValueError',
    'PropertyDecodeError',
    'HttpError',
    'ImageTooLargeError',
    'NetworkError',
]
