"""
Reader for the thumbnail URLs of an image.
"""

from typing import Any, Dict

from ..models.entities import Thumbnails, UnhandledProperties
from .base import ObjectReader, read_optional_url

# Wire key -> model field
THUMBNAIL_FIELDS = {
    "small": "small",
    "large": "large",
    "250": "size_250",
    "500": "size_500",
    "1200": "size_1200",
}


class ThumbnailsReader(ObjectReader[Thumbnails]):
    entity = "thumbnails"

    def read_property(self, prop: str, value: Any, fields: Dict[str, Any]) -> bool:
        name = THUMBNAIL_FIELDS.get(prop)
        if name is None:
            return False
        fields[name] = read_optional_url(value)
        return True

    def create(self, fields: Dict[str, Any], rest: UnhandledProperties) -> Thumbnails:
        return Thumbnails(unhandled_properties=rest, **fields)


thumbnails_reader = ThumbnailsReader()
