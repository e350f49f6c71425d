"""
CLI commands for invitation tokens.
"""

import asyncio

import typer
from rich.console import Console

from ...invitations import InviteTokenValidator, SupabaseInviteRepository, UserCategory

console = Console()
app = typer.Typer(help="Inspect invitation tokens")


@app.command("validate")
def invites_validate_command(
    token: str = typer.Argument(..., help="Invitation token"),
    user_type: UserCategory = typer.Option(
        UserCategory.INTERNAL, "--type", "-t", help="User partition to search"
    ),
) -> None:
    """Check whether an invitation token can still be redeemed."""

    async def _validate():
        validator = InviteTokenValidator(SupabaseInviteRepository())
        return await validator.validate(token, user_type)

    result = asyncio.run(_validate())

    if result.valid:
        console.print("[green]✓[/green] Invitation is valid")
        console.print(f"  Name: {result.user.name}")
        console.print(f"  Email: {result.user.email}")
        console.print(f"  Expires: {result.user.expires_at}")
        return

    console.print(f"[red]Error:[/red] {result.error}")
    raise typer.Exit(1)
