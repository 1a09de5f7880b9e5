"""
Display management for the coverart CLI with Rich components.
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from ..core.config import ERROR_MESSAGES
from ..models.entities import Image, Release
from ..models.images import CoverArtImage


class DisplayManager:
    """Formats releases and fetched images for the terminal."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    @staticmethod
    def _flags(image: Image) -> str:
        flags = []
        if image.front:
            flags.append("[bold green]front[/bold green]")
        if image.back:
            flags.append("[bold cyan]back[/bold cyan]")
        if not image.approved:
            flags.append("[yellow]unapproved[/yellow]")
        return " ".join(flags)
    
    def create_release_table(self, release: Release) -> Table:
        """Build a table with one row per image of the release."""
        table = Table(box=box.ROUNDED, show_lines=False, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("ID", style="bold")
        table.add_column("Types")
        table.add_column("Flags")
        table.add_column("Edit", justify="right", style="dim")
        table.add_column("Comment", overflow="fold")
        
        for number, image in enumerate(release.images, 1):
            table.add_row(
                str(number),
                escape(image.id),
                escape(str(image.types)),
                self._flags(image),
                str(image.edit),
                escape(image.comment or ""),
            )
        return table
    
    def display_release(self, release: Release):
        """Display a release and its images."""
        self.console.print(Panel(f"[bold]{escape(release.location)}[/bold]", title="Cover Art", expand=False))
        if not release.images:
            self.console.print("[yellow]⚠[/yellow] No images registered for this release.")
            return
        self.console.print(self.create_release_table(release))
        if release.unhandled_properties:
            keys = ", ".join(sorted(release.unhandled_properties))
            self.console.print(f"[dim]Unhandled properties: {keys}[/dim]")
    
    def display_not_found(self, mbid: str):
        self.console.print(f"[yellow]⚠[/yellow] {ERROR_MESSAGES['NOT_FOUND'].format(mbid=mbid)}")
    
    def display_image_saved(self, image: CoverArtImage, path: str):
        """Display the result of an image download."""
        self.console.print(
            f"[green]✓[/green] Saved image [bold]{escape(image.id)}[/bold] "
            f"({image.content_type or 'unknown type'}, {len(image)} bytes) to {escape(path)}"
        )
    
    def display_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
