"""
Image sizes and raw image payloads.
"""

import enum
from dataclasses import dataclass
from typing import Optional


class ImageSize(enum.IntEnum):
    """The rendition of an image to fetch from the CoverArt Archive."""
    # The image as uploaded; can be of any size or media type.
    ORIGINAL = 0
    # Thumbnails are always image/jpeg.
    SMALL = 250
    LARGE = 500
    HUGE = 1200

    @property
    def suffix(self) -> str:
        """URL suffix selecting this rendition (empty for the original)."""
        if self is ImageSize.ORIGINAL:
            return ""
        return f"-{int(self)}"

    @classmethod
    def parse(cls, value: str) -> "ImageSize":
        """Parse ``original`` or a pixel size (``250``, ``500``, ``1200``)."""
        text = value.strip().lower()
        if text == "original":
            return cls.ORIGINAL
        try:
            return cls(int(text))
        except ValueError:
            raise ValueError(f"Unsupported image size: {value!r}") from None


@dataclass(frozen=True)
class CoverArtImage:
    """Image bytes fetched from the CoverArt Archive."""
    id: str
    size: ImageSize
    content_type: Optional[str]
    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """File extension matching the content type (``.jpg`` when unknown)."""
        extensions = {
            "image/jpeg": ".jpg",
            "image/png": ".png",
            "image/gif": ".gif",
            "image/webp": ".webp",
            "application/pdf": ".pdf",
        }
        return extensions.get(self.content_type or "", ".jpg")
