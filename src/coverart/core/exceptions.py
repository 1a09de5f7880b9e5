"""
Custom exceptions for the CoverArt Archive client.
"""

from typing import Optional


class CoverArtError(Exception):
    """Base exception for the CoverArt Archive client."""
    pass


class ConfigurationError(CoverArtError):
    """Exception raised when configuration is invalid."""
    pass


class DecodeError(CoverArtError, ValueError):
    """Exception raised when a CoverArt Archive response cannot be decoded."""
    pass


class MissingFieldError(DecodeError):
    """A required property was absent or null."""

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"Required property '{field}' missing or null in {entity}.")


class MalformedIdentifierError(DecodeError):
    """An image ID was neither a string nor an unsigned integer."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            "A CoverArt Archive ID is expected to be expressed either as a number or a string, "
            f"but a '{kind}' value was found instead."
        )


class MalformedValueError(DecodeError):
    """A property was present but of the wrong JSON kind."""

    def __init__(self, expected: str, kind: str):
        self.expected = expected
        self.kind = kind
        super().__init__(f"Expected {expected}, but a '{kind}' value was found instead.")


class PropertyDecodeError(DecodeError):
    """
    Wraps a failure raised while decoding one property of an entity.

    The original error is available as ``__cause__``; ``root_cause`` follows
    the chain through nested entities down to the first failure.
    """

    def __init__(self, entity: str, property_name: str, cause: Exception):
        self.entity = entity
        self.property_name = property_name
        self.cause = cause
        super().__init__(f"Failed to deserialize the '{property_name}' property of {entity}: {cause}")

    @property
    def root_cause(self) -> Exception:
        error: Exception = self
        while isinstance(error, PropertyDecodeError):
            error = error.cause
        return error

    @property
    def path(self) -> str:
        """Dotted property path from the outermost entity to the failure."""
        path = self.property_name
        error = self.cause
        while isinstance(error, PropertyDecodeError):
            name = error.property_name
            path += name if name.startswith("[") else f".{name}"
            error = error.cause
        return path


class HttpError(CoverArtError):
    """Exception raised when the CoverArt Archive reports an HTTP error status."""

    def __init__(self, status: int, reason: Optional[str] = None, message: Optional[str] = None):
        self.status = status
        self.reason = reason
        self.message = message
        text = f"HTTP {status} '{reason}'"
        if message:
            text += f": {message}"
        super().__init__(text)


class ImageTooLargeError(CoverArtError):
    """Exception raised when an image exceeds the configured maximum size."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"The requested image is too large ({size} > {limit}).")


class NetworkError(CoverArtError, ConnectionError):
    """Exception raised when network operations fail."""
    pass
