"""
Release, image and thumbnail models decoded from CoverArt Archive responses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .images import ImageSize
from .types import CoverArtType, CoverArtTypeSet

#: Any value produced by decoding JSON.
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

#: Properties present in a payload but not modelled by the entity.
UnhandledProperties = Optional[Mapping[str, JsonValue]]


@dataclass(frozen=True)
class Thumbnails:
    """Thumbnail URLs generated for an image; any of them may be missing."""
    small: Optional[str] = None  # legacy name for the 250px rendition
    large: Optional[str] = None  # legacy name for the 500px rendition
    size_250: Optional[str] = None
    size_500: Optional[str] = None
    size_1200: Optional[str] = None
    unhandled_properties: UnhandledProperties = field(default=None, compare=False)

    def get(self, size: ImageSize) -> Optional[str]:
        """URL of the thumbnail for a size, falling back to the legacy fields."""
        if size is ImageSize.SMALL:
            return self.size_250 or self.small
        if size is ImageSize.LARGE:
            return self.size_500 or self.large
        if size is ImageSize.HUGE:
            return self.size_1200
        return None


@dataclass(frozen=True)
class Image:
    """An image stored in the CoverArt Archive."""
    edit: int  # MusicBrainz edit that added the image
    id: str  # assigned at upload, never changes
    thumbnails: Thumbnails
    types: CoverArtTypeSet
    approved: bool = False
    back: bool = False
    front: bool = False
    comment: Optional[str] = None
    location: Optional[str] = None
    unhandled_properties: UnhandledProperties = field(default=None, compare=False)

    @property
    def unknown_types(self) -> Tuple[str, ...]:
        return self.types.unknown

    def is_type(self, flag: CoverArtType) -> bool:
        return flag in self.types


@dataclass(frozen=True)
class Release:
    """The cover art registered for a release (or a release group's main release)."""
    location: str
    images: Tuple[Image, ...]
    unhandled_properties: UnhandledProperties = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "images", tuple(self.images))

    @property
    def front(self) -> Optional[Image]:
        """The first image flagged as the main front image, if any."""
        return next((image for image in self.images if image.front), None)

    @property
    def back(self) -> Optional[Image]:
        """The first image flagged as the main back image, if any."""
        return next((image for image in self.images if image.back), None)

    def find_image(self, image_id: str) -> Optional[Image]:
        return next((image for image in self.images if image.id == image_id), None)
