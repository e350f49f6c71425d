"""
Sprintdesk CLI.

Usage:
    sprintdesk invites validate   Check an invitation token
    sprintdesk phone format       Apply the phone display mask
    sprintdesk phone check        Validate a phone number
    sprintdesk urls check         Check whether an image URL is trusted
    sprintdesk serve              Run the token validation API
"""

import typer
import uvicorn
from rich.console import Console

from ..observability import setup_logging
from .commands import invites, phone, urls

# Create the main Typer app
app = typer.Typer(
    name="sprintdesk",
    help="Sprint dashboard utilities and invitation token validation",
    add_completion=False,
)

console = Console()

app.add_typer(invites.app, name="invites")
app.add_typer(phone.app, name="phone")
app.add_typer(urls.app, name="urls")


@app.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    log_format: str = typer.Option("text", "--log-format", help="json or text"),
) -> None:
    """Run the token validation API with uvicorn."""
    from ..integrations.fastapi import create_app

    console.print(f"[green]Serving[/green] on http://{host}:{port}/validate-token")
    uvicorn.run(create_app(log_format=log_format), host=host, port=port)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    Sprintdesk - sprint dashboard utilities.
    """
    setup_logging("DEBUG" if verbose else "WARNING", "text")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
