"""
coverart - CoverArt Archive client
Main entry point for the command-line tool.
"""

import sys

from .core import setup_logging, get_logger
from .core.exceptions import ConfigurationError
from .core.validation import validate_and_raise
from .ui.cli import CoverArtCLI

logger = get_logger("main")


def main(argv=None) -> int:
    """Main entry point."""
    setup_logging()
    logger.debug("Starting coverart")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except ConfigurationError as e:
            logger.error(str(e))
            return 1
        
        cli = CoverArtCLI()
        return cli.run(argv)
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Shutting down")


if __name__ == "__main__":
    sys.exit(main())
