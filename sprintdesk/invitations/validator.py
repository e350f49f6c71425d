"""
Invitation token validation.

Decides whether an invitation link can still be redeemed and returns the
invitee's public profile when it can. Every failure mode is converted to a
TokenValidationResult here; callers never see an exception.
"""

import logging
from typing import Any
from urllib.parse import quote

from ..observability import redact
from .models import TokenValidationResult, UserCategory
from .repository import InviteRepository

logger = logging.getLogger(__name__)


class InviteTokenValidator:
    """
    Validates invitation tokens for internal and partner users.

    Outcomes:
    1. Missing token or unknown user category -> missing parameters (400)
    2. No unexpired, unconsumed invite for the token -> invalid or expired (200)
    3. A matching invite -> valid, with name, email and expiry (200)
    4. Store unreachable, misconfigured or inconsistent -> failure (500)

    Example:
        ```python
        validator = InviteTokenValidator(SupabaseInviteRepository())
        result = await validator.validate(token, "partner")
        if result.valid:
            print(f"Welcome, {result.user.name}")
        ```
    """

    def __init__(self, repository: InviteRepository) -> None:
        """
        Initialize InviteTokenValidator.

        Args:
            repository: Invitation store to query
        """
        self.repository = repository

    async def validate(self, token: Any, user_category: Any) -> TokenValidationResult:
        """
        Validate an invitation token.

        Performs exactly one read against the store and no retries.

        Args:
            token: Invitation token from the link
            user_category: "internal" or "partner"

        Returns:
            TokenValidationResult; its status_code gives the transport status
        """
        category = UserCategory.parse(user_category)
        if not token or not isinstance(token, str) or category is None:
            return TokenValidationResult.missing_parameters()

        try:
            record = await self.repository.find_active_invite(token, category)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            # Error text can carry the request URL, where the token is percent-encoded
            logger.error(
                "Invite token validation failed: %s",
                redact(message, token, quote(token, safe="")),
                extra={"user_category": category.value, "outcome": "backend_failure"},
            )
            return TokenValidationResult.failure(message)

        if record is None:
            logger.debug(
                "Invite token rejected",
                extra={"user_category": category.value, "outcome": "invalid_or_expired"},
            )
            return TokenValidationResult.invalid_or_expired()

        return TokenValidationResult.success(record)
