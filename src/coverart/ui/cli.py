"""
coverart CLI Module
Command-line access to the CoverArt Archive.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from ..clients.coverart import CoverArtClient, format_mbid
from ..core.config import CLI_CONFIG, ERROR_MESSAGES, PROJECT_DESCRIPTION, PROJECT_NAME, PROJECT_VERSION
from ..core.exceptions import CoverArtError, DecodeError, NetworkError
from ..core.logger import get_logger, setup_logging
from ..models.images import ImageSize
from .display import DisplayManager

logger = get_logger("ui.cli")


class CoverArtCLI:
    """Main CLI class for the coverart tool."""
    
    def __init__(self, client: Optional[CoverArtClient] = None, display_manager: Optional[DisplayManager] = None):
        """Initialize the CLI."""
        self.client = client or CoverArtClient.for_application(
            CLI_CONFIG["APPLICATION"], PROJECT_VERSION, CLI_CONFIG["CONTACT"]
        )
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_NAME} - {PROJECT_DESCRIPTION} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s release 76df3287-6cda-33eb-8e9a-044b5e15ffdd
  %(prog)s release --group 1b022e01-4da6-387b-8658-8678046e4cef
  %(prog)s fetch 76df3287-6cda-33eb-8e9a-044b5e15ffdd --size 500 --output cover.jpg
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable debug logging'
        )
        
        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )
        
        release_parser = subparsers.add_parser(
            'release',
            help='Show the cover art registered for a release'
        )
        self._add_common_args(release_parser)
        release_parser.add_argument(
            '--if-available',
            action='store_true',
            help='Report missing cover art instead of failing'
        )
        
        fetch_parser = subparsers.add_parser(
            'fetch',
            help='Download an image of a release'
        )
        self._add_common_args(fetch_parser)
        self._add_fetch_args(fetch_parser)
        
        return parser
    
    def _add_common_args(self, parser: argparse.ArgumentParser):
        parser.add_argument(
            'mbid',
            help='MusicBrainz release (or release group) ID'
        )
        parser.add_argument(
            '--group', '-g',
            action='store_true',
            help='Treat the ID as a release group'
        )
    
    def _add_fetch_args(self, parser: argparse.ArgumentParser):
        """Add arguments for fetch mode."""
        parser.add_argument(
            '--image', '-i',
            default='front',
            help='Image ID, or "front"/"back" (default: front)'
        )
        parser.add_argument(
            '--size', '-s',
            choices=CLI_CONFIG["SIZE_CHOICES"],
            default='original',
            help='Image size (default: original)'
        )
        parser.add_argument(
            '--output', '-o',
            help='Output file (default: <image><extension> in the current directory)'
        )
    
    def handle_release(self, mbid: str, group: bool = False, if_available: bool = False) -> int:
        if group:
            fetch = self.client.fetch_group_release_if_available if if_available else self.client.fetch_group_release
        else:
            fetch = self.client.fetch_release_if_available if if_available else self.client.fetch_release
        release = fetch(mbid)
        if release is None:
            self.display_manager.display_not_found(mbid)
            return 1
        self.display_manager.display_release(release)
        return 0
    
    def handle_fetch(self, mbid: str, image_id: str = 'front', size: str = 'original',
                     group: bool = False, output: Optional[str] = None) -> int:
        image_size = ImageSize.parse(size)
        if group:
            if image_id != 'front':
                self.display_manager.display_error("Release groups only provide their front image.")
                return 2
            image = self.client.fetch_group_front(mbid, image_size)
        else:
            image = self.client.fetch_image(mbid, image_id, image_size)
        
        path = Path(output) if output else Path(f"{image_id}{image_size.suffix}{image.extension}")
        path.write_bytes(image.data)
        self.display_manager.display_image_saved(image, str(path))
        return 0
    
    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        
        if parsed_args.verbose:
            setup_logging(level="DEBUG")
        
        try:
            try:
                mbid = format_mbid(parsed_args.mbid)
            except ValueError as e:
                self.display_manager.display_error(f"{ERROR_MESSAGES['INVALID_MBID']} {e}")
                return 1
            if parsed_args.mode == 'release':
                return self.handle_release(mbid, parsed_args.group, parsed_args.if_available)
            if parsed_args.mode == 'fetch':
                return self.handle_fetch(
                    mbid,
                    image_id=parsed_args.image,
                    size=parsed_args.size,
                    group=parsed_args.group,
                    output=parsed_args.output
                )
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        except NetworkError as e:
            logger.debug("Command failed", exc_info=True)
            self.display_manager.display_error(f"{ERROR_MESSAGES['NETWORK_ERROR']} {e}")
            return 1
        except DecodeError as e:
            logger.debug("Command failed", exc_info=True)
            self.display_manager.display_error(f"{ERROR_MESSAGES['DECODE_ERROR']} {e}")
            return 1
        except (CoverArtError, ValueError, OSError) as e:
            logger.debug("Command failed", exc_info=True)
            self.display_manager.display_error(str(e))
            return 1
        finally:
            self.client.close()
        return 0
