"""
Reader for CoverArt Archive image IDs, which the server emits either as a
JSON string or as a JSON number.
"""

from typing import Any

from ..core.exceptions import MalformedIdentifierError
from .base import json_kind

UINT64_MAX = 2 ** 64 - 1


def read_identifier(value: Any) -> str:
    """
    Normalize an image ID to its string form.

    Strings are kept verbatim; unsigned 64-bit integers are rendered in plain
    decimal. Every other kind of value is rejected.

    Raises:
        MalformedIdentifierError: If the value is not a string or an unsigned integer
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= UINT64_MAX:
            return str(value)
        raise MalformedIdentifierError(f"out-of-range integer {value}")
    raise MalformedIdentifierError(json_kind(value))
