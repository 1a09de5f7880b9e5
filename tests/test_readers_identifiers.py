"""
Tests for image ID normalization.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from coverart.core.exceptions import MalformedIdentifierError
from coverart.readers.identifiers import read_identifier, UINT64_MAX


class TestReadIdentifier:
    """Tests for read_identifier."""
    
    def test_string_kept_verbatim(self):
        """Test string IDs are returned unchanged."""
        assert read_identifier("12345") == "12345"
        assert read_identifier("0012") == "0012"
        assert read_identifier("") == ""
    
    def test_integer_rendered_in_decimal(self):
        """Test integer IDs use plain decimal without separators."""
        assert read_identifier(12345) == "12345"
        assert read_identifier(0) == "0"
        assert read_identifier(1234567890123) == "1234567890123"
        assert read_identifier(UINT64_MAX) == "18446744073709551615"
    
    def test_string_and_integer_agree(self):
        """Test both representations normalize to the same ID."""
        assert read_identifier(12345) == read_identifier("12345")
    
    @pytest.mark.parametrize("value,kind", [
        (True, "boolean"),
        (False, "boolean"),
        (None, "null"),
        (1.5, "number"),
        ([1], "array"),
        ({"id": 1}, "object"),
    ])
    def test_other_kinds_rejected(self, value, kind):
        """Test that non-string, non-integer values are rejected."""
        with pytest.raises(MalformedIdentifierError) as exc_info:
            read_identifier(value)
        assert exc_info.value.kind == kind
    
    def test_out_of_range_rejected(self):
        """Test negative and oversized integers are rejected."""
        with pytest.raises(MalformedIdentifierError):
            read_identifier(-1)
        with pytest.raises(MalformedIdentifierError):
            read_identifier(UINT64_MAX + 1)
