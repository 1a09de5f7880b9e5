"""
CoverArt Archive Client Module
A client for fetching cover art information and images from the CoverArt Archive.
"""

import uuid
from typing import Optional, Union

import requests

from ..core.config import COVERART_CONFIG, PROJECT_NAME, PROJECT_URL, PROJECT_VERSION
from ..core.exceptions import ImageTooLargeError, NetworkError
from ..core.logger import get_logger
from ..models.entities import Release
from ..models.images import CoverArtImage, ImageSize
from ..readers import decode_release
from .errors import raise_for_status

logger = get_logger("clients.coverart")

MbidLike = Union[uuid.UUID, str]

RELEASE = "release"
RELEASE_GROUP = "release-group"
CHUNK_SIZE = 64 * 1024


def format_mbid(mbid: MbidLike) -> str:
    """
    Render a MusicBrainz ID in canonical form.

    Raises:
        ValueError: If the value is not a valid UUID
    """
    if isinstance(mbid, uuid.UUID):
        return str(mbid)
    try:
        return str(uuid.UUID(str(mbid).strip()))
    except ValueError:
        raise ValueError(f"Invalid MusicBrainz ID: {mbid!r}") from None


def read_content_length(response: requests.Response) -> Optional[int]:
    """Declared body length of a response, or None when absent or unusable."""
    header = response.headers.get("Content-Length")
    if not header:
        return None
    try:
        length = int(header)
    except ValueError:
        logger.debug("Ignoring malformed Content-Length header: %r", header)
        return None
    return length if length >= 0 else None


class CoverArtClient:
    """
    CoverArt Archive client.

    Each call performs a single request; there is no caching or retrying.
    """
    
    def __init__(
        self,
        user_agent: Optional[str] = None,
        server: Optional[str] = None,
        port: Optional[int] = None,
        url_scheme: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            user_agent: Application product token(s), e.g. "MyApp/1.0 (me@example.com)";
                the client appends its own
            server: Host name of the archive (default from COVERART_CONFIG)
            port: Explicit port, or None for the scheme's default
            url_scheme: "https" or "http"
            timeout: Request timeout in seconds
            session: Existing requests session to use
        """
        self.server = server or COVERART_CONFIG["SERVER"]
        self.port = port if port is not None else COVERART_CONFIG["PORT"]
        self.url_scheme = url_scheme or COVERART_CONFIG["URL_SCHEME"]
        self.timeout = timeout or COVERART_CONFIG["TIMEOUT"]
        self.max_image_size = COVERART_CONFIG["MAX_IMAGE_SIZE"]
        
        library_agent = f"{PROJECT_NAME}/{PROJECT_VERSION} ({PROJECT_URL})"
        user_agent = user_agent if user_agent is not None else COVERART_CONFIG["USER_AGENT"]
        self.user_agent = f"{user_agent} {library_agent}" if user_agent else library_agent
        
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
        })
    
    @classmethod
    def for_application(cls, application: str, version: str, contact: str, **kwargs) -> "CoverArtClient":
        """Create a client identifying the calling application in its user agent."""
        return cls(user_agent=f"{application}/{version} ({contact})", **kwargs)
    
    def __enter__(self) -> "CoverArtClient":
        return self
    
    def __exit__(self, *exc_info):
        self.close()
    
    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
    
    @property
    def base_url(self) -> str:
        netloc = self.server if self.port is None else f"{self.server}:{self.port}"
        return f"{self.url_scheme}://{netloc}"
    
    def build_url(self, entity: str, mbid: MbidLike, image_id: Optional[str] = None,
                  size: ImageSize = ImageSize.ORIGINAL) -> str:
        """Build the URL of a release document, or of an image when image_id is given."""
        url = f"{self.base_url}/{entity}/{format_mbid(mbid)}"
        if image_id is not None:
            url += f"/{image_id}{ImageSize(size).suffix}"
        return url
    
    def _get(self, url: str, accept: str, stream: bool = False) -> requests.Response:
        """Perform a GET request, mapping transport failures to NetworkError."""
        logger.debug("Web service request: GET %s", url)
        try:
            response = self.session.get(
                url,
                headers={'Accept': accept},
                timeout=self.timeout,
                stream=stream,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        logger.debug(
            "Response: %s '%s' (%s, %s byte(s))",
            response.status_code,
            response.reason,
            response.headers.get("Content-Type"),
            response.headers.get("Content-Length", "?"),
        )
        return response
    
    def _fetch_release(self, entity: str, mbid: MbidLike, if_available: bool = False) -> Optional[Release]:
        url = self.build_url(entity, mbid)
        response = self._get(url, COVERART_CONFIG["ACCEPT"])
        try:
            if if_available and response.status_code == 404:
                logger.debug("No cover art available for %s %s", entity, mbid)
                return None
            raise_for_status(response)
            return decode_release(response.content)
        finally:
            response.close()
    
    def _fetch_image(self, entity: str, mbid: MbidLike, image_id: str, size: ImageSize) -> CoverArtImage:
        size = ImageSize(size)
        url = self.build_url(entity, mbid, image_id, size)
        response = self._get(url, "image/*", stream=True)
        try:
            raise_for_status(response)
            declared = read_content_length(response)
            if declared is not None and declared > self.max_image_size:
                raise ImageTooLargeError(declared, self.max_image_size)
            data = bytearray()
            try:
                for chunk in response.iter_content(CHUNK_SIZE):
                    data.extend(chunk)
                    if len(data) > self.max_image_size:
                        raise ImageTooLargeError(len(data), self.max_image_size)
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"Failed to read image data from {url}: {e}") from e
            content_type = response.headers.get("Content-Type")
            if content_type:
                content_type = content_type.split(";")[0].strip()
            return CoverArtImage(id=image_id, size=size, content_type=content_type, data=bytes(data))
        finally:
            response.close()
    
    def fetch_release(self, mbid: MbidLike) -> Release:
        """
        Fetch the cover art information for a release.
        
        Raises:
            HttpError: 404 when the release does not exist or has no cover art;
                503 when the server is unavailable or rate limiting is in effect
            NetworkError: On connectivity failures
            DecodeError: If the response is malformed
        """
        return self._fetch_release(RELEASE, mbid)
    
    def fetch_release_if_available(self, mbid: MbidLike) -> Optional[Release]:
        """Like fetch_release, but returns None instead of raising for a 404."""
        return self._fetch_release(RELEASE, mbid, if_available=True)
    
    def fetch_group_release(self, mbid: MbidLike) -> Release:
        """Fetch the cover art information for a release group's main release."""
        return self._fetch_release(RELEASE_GROUP, mbid)
    
    def fetch_group_release_if_available(self, mbid: MbidLike) -> Optional[Release]:
        return self._fetch_release(RELEASE_GROUP, mbid, if_available=True)
    
    def fetch_image(self, mbid: MbidLike, image_id: str, size: ImageSize = ImageSize.ORIGINAL) -> CoverArtImage:
        """
        Fetch an image of a release.
        
        Args:
            mbid: MusicBrainz release ID
            image_id: Image ID (see Image.id), or "front"/"back"
            size: Original image or one of the thumbnail sizes
            
        Returns:
            The image bytes and content type
        """
        return self._fetch_image(RELEASE, mbid, image_id, size)
    
    def fetch_front(self, mbid: MbidLike, size: ImageSize = ImageSize.ORIGINAL) -> CoverArtImage:
        return self._fetch_image(RELEASE, mbid, "front", size)
    
    def fetch_back(self, mbid: MbidLike, size: ImageSize = ImageSize.ORIGINAL) -> CoverArtImage:
        return self._fetch_image(RELEASE, mbid, "back", size)
    
    def fetch_group_front(self, mbid: MbidLike, size: ImageSize = ImageSize.ORIGINAL) -> CoverArtImage:
        """Fetch the front image of a release group's main release."""
        return self._fetch_image(RELEASE_GROUP, mbid, "front", size)
