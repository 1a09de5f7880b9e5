"""
Configuration validation utilities.
"""

import importlib
from typing import List, Tuple
from .config import COVERART_CONFIG, LOGGING_CONFIG
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }
    
    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )
    
    if not COVERART_CONFIG["SERVER"]:
        errors.append("CoverArt Archive SERVER must not be empty")
    
    if COVERART_CONFIG["URL_SCHEME"] not in ("http", "https"):
        errors.append("CoverArt Archive URL_SCHEME must be 'http' or 'https'")
    
    port = COVERART_CONFIG["PORT"]
    if port is not None and (not isinstance(port, int) or not (0 < port < 65536)):
        errors.append(f"CoverArt Archive PORT must be an integer between 1 and 65535 (got {port!r})")
    
    timeout = COVERART_CONFIG["TIMEOUT"]
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        errors.append(f"CoverArt Archive TIMEOUT must be a number > 0 (got {timeout!r})")
    
    if COVERART_CONFIG["MAX_IMAGE_SIZE"] < 1:
        errors.append("MAX_IMAGE_SIZE must be >= 1")
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")
    
    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
