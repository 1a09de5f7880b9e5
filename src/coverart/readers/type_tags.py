"""
Reader for the ``types`` array of an image.
"""

from typing import Any, List

from ..core.exceptions import MalformedValueError
from ..models.types import CoverArtType, CoverArtTypeSet, add_type_tag
from .base import json_kind, logger, read_optional_list


def read_type_tags(value: Any) -> CoverArtTypeSet:
    """
    Fold a JSON array of type tags into a type set.

    ``null`` is read as an empty array. Tags missing from the registry are
    kept as unknown types rather than rejected.
    """
    flags = CoverArtType.NONE
    unknown: List[str] = []
    for tag in read_optional_list(value) or ():
        if not isinstance(tag, str):
            raise MalformedValueError("a type tag string", json_kind(tag))
        flags = add_type_tag(tag, flags, unknown)
    if unknown:
        logger.debug("Unknown cover art types: %s", ", ".join(unknown))
    return CoverArtTypeSet(flags, tuple(unknown))
