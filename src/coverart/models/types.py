"""
Cover art type flags and the open-ended type set attached to each image.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union


class CoverArtType(enum.IntFlag):
    """Flag enumeration of the image types known to the CoverArt Archive."""

    NONE = 0
    # The front of the packaging (for digital releases, the image shown in a store).
    FRONT = 1 << 0
    # The back of the packaging; often holds the track listing and barcode.
    BACK = 1 << 1
    BOOKLET = 1 << 2
    # The medium itself (the disc, the vinyl record, ...).
    MEDIUM = 1 << 3
    TRAY = 1 << 4
    # A strip of paper around the spine.
    OBI = 1 << 5
    SPINE = 1 << 6
    # Artwork attached to a single track of a digital release.
    TRACK = 1 << 7
    # A protective sleeve around the medium.
    LINER = 1 << 8
    STICKER = 1 << 9
    POSTER = 1 << 10
    WATERMARK = 1 << 11
    # Usable for reference, but needs more work before tagging (e.g. an uncropped scan).
    RAW_UNEDITED = 1 << 12
    # A type reported by the server that this client does not recognize.
    UNKNOWN = 1 << 62
    OTHER = 1 << 63


#: Wire spelling of every known type tag. Matching is exact and case-sensitive.
KNOWN_TYPE_TAGS = {
    "Front": CoverArtType.FRONT,
    "Back": CoverArtType.BACK,
    "Booklet": CoverArtType.BOOKLET,
    "Medium": CoverArtType.MEDIUM,
    "Tray": CoverArtType.TRAY,
    "Obi": CoverArtType.OBI,
    "Spine": CoverArtType.SPINE,
    "Track": CoverArtType.TRACK,
    "Liner": CoverArtType.LINER,
    "Sticker": CoverArtType.STICKER,
    "Poster": CoverArtType.POSTER,
    "Watermark": CoverArtType.WATERMARK,
    "Raw/Unedited": CoverArtType.RAW_UNEDITED,
    "Other": CoverArtType.OTHER,
}

_TAG_NAMES = {flag: tag for tag, flag in KNOWN_TYPE_TAGS.items()}

# Single flags in declaration order, for iteration.
_SINGLE_FLAGS = [flag for flag in CoverArtType.__members__.values() if flag]


def add_type_tag(tag: str, types: CoverArtType, unknown: List[str]) -> CoverArtType:
    """
    Fold one wire type tag into an accumulated flag value.

    Unrecognized tags are never rejected: they set ``UNKNOWN`` and are
    appended verbatim to ``unknown``.
    """
    flag = KNOWN_TYPE_TAGS.get(tag)
    if flag is None:
        unknown.append(tag)
        return types | CoverArtType.UNKNOWN
    return types | flag


@dataclass(frozen=True)
class CoverArtTypeSet:
    """
    The set of types attached to an image.

    ``unknown`` holds the raw tags the client could not map to a flag;
    ``CoverArtType.UNKNOWN`` is part of ``flags`` exactly when it is non-empty.
    """
    flags: CoverArtType = CoverArtType.NONE
    unknown: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "flags", CoverArtType(self.flags))
        object.__setattr__(self, "unknown", tuple(self.unknown))
        if bool(self.flags & CoverArtType.UNKNOWN) != bool(self.unknown):
            raise ValueError("UNKNOWN must be set if and only if unknown tags are present")

    @classmethod
    def from_tags(cls, tags: Optional[Iterable[str]]) -> "CoverArtTypeSet":
        """Build a type set from wire tags (``None`` means no types)."""
        flags = CoverArtType.NONE
        unknown: List[str] = []
        for tag in tags or ():
            flags = add_type_tag(tag, flags, unknown)
        return cls(flags, tuple(unknown))

    def __contains__(self, flag: CoverArtType) -> bool:
        return bool(flag) and (self.flags & flag) == flag

    def __iter__(self) -> Iterator[CoverArtType]:
        return (flag for flag in _SINGLE_FLAGS if flag in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return bool(self.flags)

    def __or__(self, other: Union["CoverArtTypeSet", CoverArtType]) -> "CoverArtTypeSet":
        if isinstance(other, CoverArtTypeSet):
            return CoverArtTypeSet(self.flags | other.flags, self.unknown + other.unknown)
        if isinstance(other, CoverArtType):
            if other & CoverArtType.UNKNOWN and not self.unknown:
                raise ValueError("UNKNOWN cannot be added without the tags it stands for")
            return CoverArtTypeSet(self.flags | other, self.unknown)
        return NotImplemented

    __ror__ = __or__

    def names(self) -> List[str]:
        """Wire spellings of the types, known tags first, then unknown ones."""
        known = [_TAG_NAMES[flag] for flag in self if flag in _TAG_NAMES]
        return known + list(self.unknown)

    def __str__(self) -> str:
        return ", ".join(self.names()) or "-"
