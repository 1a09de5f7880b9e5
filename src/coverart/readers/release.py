"""
Reader for the top-level release document.
"""

from typing import Any, Dict

from ..models.entities import Release, UnhandledProperties
from .base import ObjectReader, read_optional_url
from .image import image_reader


class ReleaseReader(ObjectReader[Release]):
    entity = "release"

    def read_property(self, prop: str, value: Any, fields: Dict[str, Any]) -> bool:
        if prop == "images":
            fields["images"] = image_reader.read_list(value)
        elif prop == "release":
            fields["location"] = read_optional_url(value)
        else:
            return False
        return True

    def create(self, fields: Dict[str, Any], rest: UnhandledProperties) -> Release:
        return Release(
            images=self.require(fields, "images"),
            location=self.require(fields, "location", "release"),
            unhandled_properties=rest,
        )


release_reader = ReleaseReader()
