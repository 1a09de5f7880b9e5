"""
Reader for a single image entry of a release.
"""

from typing import Any, Dict

from ..models.entities import Image, UnhandledProperties
from ..models.types import CoverArtTypeSet
from .base import ObjectReader, read_bool, read_int32, read_optional_string, read_optional_url
from .identifiers import read_identifier
from .thumbnails import thumbnails_reader
from .type_tags import read_type_tags


class ImageReader(ObjectReader[Image]):
    entity = "image"

    def read_property(self, prop: str, value: Any, fields: Dict[str, Any]) -> bool:
        if prop in ("approved", "back", "front"):
            fields[prop] = read_bool(value)
        elif prop == "comment":
            fields["comment"] = read_optional_string(value)
        elif prop == "edit":
            # null is left for the required-field check
            fields["edit"] = None if value is None else read_int32(value)
        elif prop == "id":
            fields["id"] = None if value is None else read_identifier(value)
        elif prop == "image":
            fields["location"] = read_optional_url(value)
        elif prop == "thumbnails":
            fields["thumbnails"] = None if value is None else thumbnails_reader.read(value)
        elif prop == "types":
            fields["types"] = read_type_tags(value)
        else:
            return False
        return True

    def create(self, fields: Dict[str, Any], rest: UnhandledProperties) -> Image:
        return Image(
            edit=self.require(fields, "edit"),
            id=self.require(fields, "id"),
            thumbnails=self.require(fields, "thumbnails"),
            types=fields.get("types") or CoverArtTypeSet(),
            approved=fields.get("approved", False),
            back=fields.get("back", False),
            front=fields.get("front", False),
            comment=fields.get("comment"),
            location=fields.get("location"),
            unhandled_properties=rest,
        )


image_reader = ImageReader()
