"""
Sprintdesk - sprint dashboard utilities with Supabase-backed invitations.

Example:
    ```python
    from sprintdesk import Sprintdesk, format_phone_number, is_trusted_url

    # Invitation tokens
    sprintdesk = await Sprintdesk.create()
    result = await sprintdesk.invites.validate(token, "partner")

    # Phone numbers
    format_phone_number("11987654321")  # '(11) 98765-4321'

    # Image URLs
    is_trusted_url("https://cdn.example.com/me.png")  # True
    ```
"""

from .client import Sprintdesk
from .config import SprintdeskConfig, load_config
from .invitations import (
    InviteRecord,
    InviteRepository,
    InviteTokenValidator,
    SupabaseInviteRepository,
    TokenValidationResult,
    UserCategory,
)
from .media import Avatar, is_trusted_url, resolve_avatar
from .phone import (
    extract_digits,
    format_phone_number,
    get_phone_validation_error,
    is_valid_phone_number,
)
from .team import TeamMember, find_member_by_name, find_members_from_list

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Sprintdesk",
    "SprintdeskConfig",
    "load_config",
    # Invitations
    "InviteTokenValidator",
    "InviteRepository",
    "SupabaseInviteRepository",
    "InviteRecord",
    "TokenValidationResult",
    "UserCategory",
    # Phone numbers
    "extract_digits",
    "format_phone_number",
    "is_valid_phone_number",
    "get_phone_validation_error",
    # Media
    "is_trusted_url",
    "resolve_avatar",
    "Avatar",
    # Team
    "TeamMember",
    "find_member_by_name",
    "find_members_from_list",
]
