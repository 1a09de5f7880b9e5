"""
Pytest configuration and shared fixtures.
"""

import copy
import json
import pytest
import sys
from pathlib import Path
from unittest.mock import Mock, MagicMock

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

MINIMAL_RELEASE = {
    "release": "https://musicbrainz.org/release/x",
    "images": [
        {
            "id": "1",
            "edit": 7,
            "front": True,
            "back": False,
            "approved": True,
            "thumbnails": {"small": "https://example/s.jpg"},
            "types": ["Front"],
        }
    ],
}

FULL_RELEASE = {
    "images": [
        {
            "approved": True,
            "back": False,
            "comment": "",
            "edit": 20202510,
            "front": True,
            "id": 829521842,
            "image": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842.jpg",
            "thumbnails": {
                "1200": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842-1200.jpg",
                "250": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842-250.jpg",
                "500": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842-500.jpg",
                "large": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842-500.jpg",
                "small": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521842-250.jpg",
            },
            "types": ["Front"],
        },
        {
            "approved": True,
            "back": True,
            "comment": "back, with barcode",
            "edit": 20202511,
            "front": False,
            "id": "829521843",
            "image": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521843.jpg",
            "thumbnails": {
                "large": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521843-500.jpg",
                "small": "http://coverartarchive.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd/829521843-250.jpg",
            },
            "types": ["Back", "Spine"],
        },
    ],
    "release": "https://musicbrainz.org/release/76df3287-6cda-33eb-8e9a-044b5e15ffdd",
}


@pytest.fixture
def minimal_release_payload():
    """The smallest valid release document (a fresh copy per test)."""
    return copy.deepcopy(MINIMAL_RELEASE)


@pytest.fixture
def full_release_payload():
    """A release document shaped like a real archive response."""
    return copy.deepcopy(FULL_RELEASE)


@pytest.fixture
def image_payload():
    """A single valid image entry."""
    return copy.deepcopy(MINIMAL_RELEASE["images"][0])


def make_response(status_code=200, json_body=None, content=b"", headers=None, reason="OK", text=None):
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.headers = dict(headers or {})
    if json_body is not None:
        content = json.dumps(json_body).encode("utf-8")
        response.headers.setdefault("Content-Type", "application/json")
    response.content = content
    response.text = text if text is not None else content.decode("utf-8", errors="replace")
    response.iter_content = Mock(return_value=iter([content[i:i + 4] for i in range(0, len(content), 4)]))
    return response


@pytest.fixture
def response_factory():
    """Factory for mock HTTP responses."""
    return make_response


@pytest.fixture
def mock_session():
    """Mock requests session."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(mock_session):
    """CoverArtClient wired to a mock session."""
    from coverart.clients.coverart import CoverArtClient
    return CoverArtClient(user_agent="Test/1.0 (test@example.com)", session=mock_session)
