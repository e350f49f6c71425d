"""
Sprintdesk invitations module.

Validates invitation tokens against the user partition tables.
"""

from .models import (
    INVALID_OR_EXPIRED,
    MISSING_PARAMETERS,
    InvitedUser,
    InviteRecord,
    TokenValidationResult,
    UserCategory,
    ValidationOutcome,
)
from .repository import (
    InviteIntegrityError,
    InviteRepository,
    InviteStoreError,
    SupabaseInviteRepository,
)
from .validator import InviteTokenValidator

__all__ = [
    "InviteTokenValidator",
    "InviteRepository",
    "SupabaseInviteRepository",
    "InviteStoreError",
    "InviteIntegrityError",
    "InviteRecord",
    "InvitedUser",
    "TokenValidationResult",
    "UserCategory",
    "ValidationOutcome",
    "MISSING_PARAMETERS",
    "INVALID_OR_EXPIRED",
]
