"""
Configuration for the CoverArt Archive client.
Contains all constants, settings, and global parameters.
"""

import os
from typing import Any, Callable, Optional


def read_env_number(name: str, convert: Callable[[str], Any], default: Optional[str] = None) -> Any:
    """
    Read a numeric setting from the environment.

    Values that do not convert are kept as the raw string for
    validate_configuration() to report.
    """
    raw = os.getenv(name) or default
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError:
        return raw


# Project Information
PROJECT_NAME = "coverart"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Typed client for the CoverArt Archive API"
PROJECT_URL = "https://github.com/antoinecrettenand/coverart"

# CoverArt Archive Configuration
COVERART_CONFIG = {
    "SERVER": os.getenv("COVERART_SERVER", "coverartarchive.org"),
    "URL_SCHEME": os.getenv("COVERART_SCHEME", "https"),
    "PORT": read_env_number("COVERART_PORT", int),
    "USER_AGENT": os.getenv("COVERART_USER_AGENT", ""),
    "TIMEOUT": read_env_number("COVERART_TIMEOUT", float, "30"),
    # The archive imposes no file size limit; its largest items are a few hundred MiB.
    "MAX_IMAGE_SIZE": 512 * 1024 * 1024,
    "ACCEPT": "application/json",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("COVERART_LOG_LEVEL", "INFO").upper(),
}

# Command Line Configuration
CLI_CONFIG = {
    "APPLICATION": "coverart-cli",
    "CONTACT": PROJECT_URL,
    "SIZE_CHOICES": ["original", "250", "500", "1200"],
}

# Error Messages
ERROR_MESSAGES = {
    "NOT_FOUND": "No cover art available for {mbid}.",
    "NETWORK_ERROR": "Network error occurred.",
    "DECODE_ERROR": "Could not decode the CoverArt Archive response.",
    "INVALID_MBID": "Invalid MusicBrainz identifier.",
}
