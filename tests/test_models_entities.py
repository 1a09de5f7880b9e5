"""
Tests for release, image and thumbnail models.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from coverart.models import (
    CoverArtImage,
    CoverArtType,
    CoverArtTypeSet,
    Image,
    ImageSize,
    Release,
    Thumbnails,
)


def make_image(image_id="1", front=False, back=False, types=None):
    return Image(
        edit=1,
        id=image_id,
        thumbnails=Thumbnails(),
        types=types or CoverArtTypeSet(),
        front=front,
        back=back,
    )


class TestThumbnails:
    """Tests for Thumbnails model."""
    
    def test_defaults(self):
        """Test every thumbnail is optional."""
        thumbnails = Thumbnails()
        
        assert thumbnails.small is None
        assert thumbnails.large is None
        assert thumbnails.size_250 is None
        assert thumbnails.size_500 is None
        assert thumbnails.size_1200 is None
        assert thumbnails.unhandled_properties is None
    
    def test_get_by_size(self):
        """Test size lookup prefers the sized fields and falls back to legacy ones."""
        thumbnails = Thumbnails(small="https://x/s.jpg", size_500="https://x/500.jpg", large="https://x/l.jpg")
        
        assert thumbnails.get(ImageSize.SMALL) == "https://x/s.jpg"
        assert thumbnails.get(ImageSize.LARGE) == "https://x/500.jpg"
        assert thumbnails.get(ImageSize.HUGE) is None
        assert thumbnails.get(ImageSize.ORIGINAL) is None
    
    def test_frozen(self):
        """Test that thumbnails cannot be modified."""
        with pytest.raises(AttributeError):
            Thumbnails().small = "https://x/s.jpg"


class TestImage:
    """Tests for Image model."""
    
    def test_defaults(self):
        """Test optional image fields."""
        image = make_image()
        
        assert image.approved is False
        assert image.comment is None
        assert image.location is None
        assert image.unknown_types == ()
    
    def test_is_type(self):
        """Test type checks through the image."""
        image = make_image(types=CoverArtTypeSet.from_tags(["Booklet", "Slipcase"]))
        
        assert image.is_type(CoverArtType.BOOKLET)
        assert not image.is_type(CoverArtType.FRONT)
        assert image.unknown_types == ("Slipcase",)


class TestRelease:
    """Tests for Release model."""
    
    def test_images_become_tuple(self):
        """Test that the image list is stored immutably."""
        release = Release(location="https://musicbrainz.org/release/x", images=[make_image()])
        
        assert isinstance(release.images, tuple)
    
    def test_front_and_back(self):
        """Test front/back pick the first flagged image."""
        images = [make_image("1"), make_image("2", back=True), make_image("3", front=True), make_image("4", front=True)]
        release = Release(location="https://musicbrainz.org/release/x", images=images)
        
        assert release.front.id == "3"
        assert release.back.id == "2"
        assert release.find_image("4") is images[3]
        assert release.find_image("5") is None
    
    def test_no_front(self):
        """Test front is None when no image is flagged."""
        release = Release(location="https://musicbrainz.org/release/x", images=[])
        assert release.front is None
        assert release.back is None


class TestImageSize:
    """Tests for ImageSize."""
    
    def test_suffix(self):
        """Test URL suffixes."""
        assert ImageSize.ORIGINAL.suffix == ""
        assert ImageSize.SMALL.suffix == "-250"
        assert ImageSize.LARGE.suffix == "-500"
        assert ImageSize.HUGE.suffix == "-1200"
    
    def test_parse(self):
        """Test parsing CLI size values."""
        assert ImageSize.parse("original") is ImageSize.ORIGINAL
        assert ImageSize.parse("Original") is ImageSize.ORIGINAL
        assert ImageSize.parse("1200") is ImageSize.HUGE
        with pytest.raises(ValueError):
            ImageSize.parse("300")
        with pytest.raises(ValueError):
            ImageSize.parse("huge-ish")


class TestCoverArtImage:
    """Tests for CoverArtImage."""
    
    def test_length_and_extension(self):
        """Test payload helpers."""
        image = CoverArtImage(id="front", size=ImageSize.ORIGINAL, content_type="image/png", data=b"\x89PNG")
        
        assert len(image) == 4
        assert image.extension == ".png"
        assert CoverArtImage("1", ImageSize.SMALL, None, b"").extension == ".jpg"
