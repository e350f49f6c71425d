"""
Invitation lookup against the user partition tables.

InviteRepository is the only storage seam the validator depends on. The
Supabase implementation runs the whole filter server-side in a single
PostgREST read:

    invite_token = :token AND invite_expires_at > now() AND auth_id IS NULL

Not found, expired and already consumed all come back as an empty result and
are indistinguishable to the caller.
"""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from postgrest.exceptions import APIError

from ..config import SprintdeskConfig, load_config
from ..utils.supabase import SprintdeskSupabaseClient
from .models import InviteRecord, UserCategory

INVITE_COLUMNS = "id, name, email, invite_expires_at"


class InviteStoreError(Exception):
    """The invitation store could not be read."""


class InviteIntegrityError(InviteStoreError):
    """More than one active invitation matched a single token."""


class InviteRepository(ABC):
    """Read access to pending invitations."""

    @abstractmethod
    async def find_active_invite(
        self,
        token: str,
        category: UserCategory,
    ) -> Optional[InviteRecord]:
        """
        Find the unexpired, unconsumed invitation holding token.

        Args:
            token: Invitation token as presented by the user
            category: Partition to search

        Returns:
            The matching record, or None

        Raises:
            InviteIntegrityError: If more than one record matches
            InviteStoreError: If the store cannot be read
        """

    async def close(self) -> None:
        """Release any connection the repository holds."""


class SupabaseInviteRepository(InviteRepository):
    """
    InviteRepository backed by the Supabase users_internal / users_partner tables.

    The Supabase client is created on first use when none is given, so a
    missing service role key is reported by the lookup itself rather than at
    construction time.

    One repository can serve many validators; it then owns that client and
    close() releases it.

    Example:
        ```python
        repository = SupabaseInviteRepository(client=sprintdesk.client)
        record = await repository.find_active_invite(token, UserCategory.PARTNER)
        ```
    """

    def __init__(
        self,
        client: Optional[SprintdeskSupabaseClient] = None,
        config: Optional[SprintdeskConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize SupabaseInviteRepository.

        Args:
            client: Supabase client wrapper (created lazily if omitted)
            config: Configuration used to build the client and table names
            clock: Returns the current UTC time (for tests)
        """
        self._client = client
        self._owns_client = client is None
        self._config = config or (client.config if client else None)
        self._client_lock = asyncio.Lock()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def _get_client(self) -> SprintdeskSupabaseClient:
        async with self._client_lock:
            if self._client is None:
                if self._config is None:
                    self._config = load_config()
                self._client = await SprintdeskSupabaseClient.create(self._config)
        return self._client

    async def close(self) -> None:
        """Close the Supabase client if this repository created it."""
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None

    def _tables(self) -> Dict[UserCategory, str]:
        return {
            UserCategory.INTERNAL: self._config.internal_users_table,
            UserCategory.PARTNER: self._config.partner_users_table,
        }

    async def find_active_invite(
        self,
        token: str,
        category: UserCategory,
    ) -> Optional[InviteRecord]:
        client = await self._get_client()
        table = self._tables()[category]
        now = self._clock().isoformat()

        try:
            # limit(2) is enough to tell "one" from "more than one"
            result = await (
                client.table(table)
                .select(INVITE_COLUMNS)
                .eq("invite_token", token)
                .gt("invite_expires_at", now)
                .is_("auth_id", "null")
                .limit(2)
                .execute()
            )
        except APIError as e:
            raise InviteStoreError(e.message or str(e)) from e

        rows = result.data or []
        if len(rows) > 1:
            raise InviteIntegrityError(
                f"Multiple active invitations share one token in {table}"
            )
        if not rows:
            return None

        return InviteRecord(**rows[0])
