"""
Basic Sprintdesk usage example.

This example demonstrates the core features of Sprintdesk:
- Invitation token validation
- Phone number masking and validation
- Avatar resolution with trusted photo URLs

Run with:
    python examples/basic_usage.py <invite-token> [internal|partner]
"""

import asyncio
import sys

from sprintdesk import (
    Sprintdesk,
    format_phone_number,
    get_phone_validation_error,
    resolve_avatar,
)


async def main(token: str, user_type: str):
    # Create Sprintdesk client (loads config from .env)
    sprintdesk = await Sprintdesk.create()

    try:
        # =================================================================
        # 1. Validate an invitation token
        # =================================================================
        print("Validating invitation...")

        result = await sprintdesk.invites.validate(token, user_type)
        if result.valid:
            print(f"  Invitation for {result.user.name} <{result.user.email}>")
            print(f"  Expires at {result.user.expires_at}")
        else:
            print(f"  Rejected ({result.status_code}): {result.error}")
    finally:
        await sprintdesk.close()

    # =================================================================
    # 2. Phone numbers
    # =================================================================
    print("\nPhone numbers...")

    for raw in ("11987654321", "(10) 2345-6789", "119"):
        error = get_phone_validation_error(raw)
        print(f"  {raw!r} -> {format_phone_number(raw)!r} {error or 'ok'}")

    # =================================================================
    # 3. Avatars
    # =================================================================
    print("\nAvatars...")

    for photo in ("https://cdn.example.com/ana.png", "data:image/png;base64,AAAA"):
        avatar = resolve_avatar("Ana Souza", photo)
        shown = avatar.photo_url or f"placeholder {avatar.initials} on {avatar.color}"
        print(f"  {photo[:30]!r} -> {shown}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    asyncio.run(main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else "internal"))
