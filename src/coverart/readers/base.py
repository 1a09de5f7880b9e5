"""
Base object reader and scalar readers for CoverArt Archive JSON.

Readers work on parsed JSON: an object is walked key by key in the order the
server sent it, known keys are decoded into fields and anything else is kept
as an unhandled property.
"""

import copy
from types import MappingProxyType
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar
from urllib.parse import urlsplit

from ..core.exceptions import (
    DecodeError,
    MalformedValueError,
    MissingFieldError,
    PropertyDecodeError,
)
from ..core.logger import get_logger
from ..models.entities import JsonValue, UnhandledProperties

T = TypeVar('T')

logger = get_logger("readers")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def json_kind(value: Any) -> str:
    """Name of the JSON kind of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def read_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise MalformedValueError("a boolean", json_kind(value))
    return value


def read_int32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedValueError("an integer", json_kind(value))
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedValueError("a 32-bit integer", f"out-of-range integer {value}")
    return value


def read_optional_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedValueError("a string", json_kind(value))
    return value


def read_optional_url(value: Any) -> Optional[str]:
    """Read an absolute URL; ``null`` is accepted as absent."""
    text = read_optional_string(value)
    if text is None:
        return None
    parts = urlsplit(text)
    if not parts.scheme or not parts.netloc:
        raise MalformedValueError("an absolute URL", f"string {text!r}")
    return text


def read_optional_list(value: Any) -> Optional[List[Any]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedValueError("an array", json_kind(value))
    return value


def read_object(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise MalformedValueError("an object", json_kind(value))
    return value


class ObjectReader(Generic[T]):
    """
    Base class for the entity readers.

    Subclasses keep their decoding state in a plain dict created per call, so
    a single reader instance can be shared between threads.
    """

    #: Entity name used in error messages.
    entity = "object"

    def read(self, value: Any) -> T:
        """
        Decode one entity from a parsed JSON object.

        Raises:
            DecodeError: If the value is not an object, a known property is
                malformed, or a required property is missing.
        """
        obj = read_object(value)
        fields: Dict[str, Any] = {}
        rest: Dict[str, JsonValue] = {}
        for prop, item in obj.items():
            try:
                if not self.read_property(prop, item, fields):
                    rest[prop] = copy.deepcopy(item)
            except DecodeError as e:
                raise PropertyDecodeError(self.entity, prop, e) from e
        if rest:
            logger.debug("Unhandled properties in %s: %s", self.entity, ", ".join(sorted(rest)))
        return self.create(fields, MappingProxyType(rest) if rest else None)

    def read_property(self, prop: str, value: Any, fields: Dict[str, Any]) -> bool:
        """
        Decode a single property into ``fields``.

        Returns:
            False if the property is not part of the schema
        """
        raise NotImplementedError

    def create(self, fields: Dict[str, Any], rest: UnhandledProperties) -> T:
        """Build the entity once every property has been read."""
        raise NotImplementedError

    def read_list(self, value: Any) -> Optional[List[T]]:
        """Decode a JSON array of entities; ``null`` yields ``None``."""
        items = read_optional_list(value)
        if items is None:
            return None
        result = []
        for index, item in enumerate(items):
            try:
                result.append(self.read(item))
            except DecodeError as e:
                raise PropertyDecodeError(f"{self.entity} list", f"[{index}]", e) from e
        return result

    def require(self, fields: Dict[str, Any], name: str, prop: Optional[str] = None) -> Any:
        """Fetch a required field, raising MissingFieldError when it was absent or null."""
        value = fields.get(name)
        if value is None:
            raise MissingFieldError(self.entity, prop or name)
        return value
