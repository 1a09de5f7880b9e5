"""
Logging configuration for the CoverArt Archive client.
Provides centralized logging setup with console output only.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the package.
    Console output only - no file logging.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging
        
    Returns:
        Configured package logger
    """
    log_level = getattr(logging, (level or LOGGING_CONFIG["LEVEL"]).upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    
    package_logger = logging.getLogger("coverart")
    package_logger.setLevel(log_level)
    
    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()
    
    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        package_logger.addHandler(console_handler)
    
    package_logger.propagate = False
    
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Library code never configures handlers itself; call setup_logging()
    from an application entry point to see the output.
    
    Args:
        name: Logger name, relative to the package logger
        
    Returns:
        Logger instance
    """
    return logging.getLogger(f"coverart.{name}")
