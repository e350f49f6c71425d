"""
CLI commands for phone numbers.
"""

import typer
from rich.console import Console

from ...phone import extract_digits, format_phone_number, get_phone_validation_error

console = Console()
app = typer.Typer(help="Format and validate phone numbers")


@app.command("format")
def phone_format_command(
    value: str = typer.Argument(..., help="Phone number in any format"),
) -> None:
    """Print a phone number with the display mask applied."""
    console.print(format_phone_number(value))


@app.command("check")
def phone_check_command(
    value: str = typer.Argument(..., help="Phone number in any format"),
) -> None:
    """Validate a phone number."""
    error = get_phone_validation_error(value)
    if error:
        console.print(f"[red]✗[/red] {error}")
        raise typer.Exit(1)

    if not extract_digits(value):
        console.print("[yellow]Empty phone number (field is optional)[/yellow]")
        return

    console.print(f"[green]✓[/green] {format_phone_number(value)}")
