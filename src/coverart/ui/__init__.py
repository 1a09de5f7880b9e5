"""
User interface modules for the coverart CLI.
"""

from .cli import CoverArtCLI
from .display import DisplayManager

__all__ = [
    'CoverArtCLI',
    'DisplayManager',
]
