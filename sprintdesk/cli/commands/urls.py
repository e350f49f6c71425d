"""
CLI commands for image URLs.
"""

import typer
from rich.console import Console

from ...media import is_trusted_url

console = Console()
app = typer.Typer(help="Check image URLs")


@app.command("check")
def urls_check_command(
    url: str = typer.Argument(..., help="Image URL or same-origin path"),
) -> None:
    """Report whether an image URL can be rendered directly."""
    if is_trusted_url(url):
        console.print("[green]✓[/green] Trusted")
        return

    console.print("[red]✗[/red] Untrusted, a placeholder will be shown")
    raise typer.Exit(1)
