"""
Main Sprintdesk client.

This is the primary interface library users interact with.
"""

from typing import Optional

from .config import SprintdeskConfig, load_config
from .invitations import InviteTokenValidator, SupabaseInviteRepository
from .utils.supabase import SprintdeskSupabaseClient


class Sprintdesk:
    """
    Main Sprintdesk client.

    Holds the configuration and the Supabase connection and exposes the
    invitation validator bound to them.

    Example:
        ```python
        from sprintdesk import Sprintdesk

        # Initialize from environment variables
        sprintdesk = await Sprintdesk.create()

        result = await sprintdesk.invites.validate(token, "internal")
        ```
    """

    def __init__(self, config: SprintdeskConfig, client: SprintdeskSupabaseClient) -> None:
        """
        Initialize Sprintdesk client.

        Args:
            config: Sprintdesk configuration
            client: Supabase client wrapper

        Note:
            Use Sprintdesk.create() instead of direct instantiation.
        """
        self.config = config
        self.client = client

        self.invites = InviteTokenValidator(
            SupabaseInviteRepository(client=client, config=config)
        )

    @classmethod
    async def create(
        cls,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        **kwargs,
    ) -> "Sprintdesk":
        """
        Create and initialize a Sprintdesk client.

        Args:
            supabase_url: Supabase project URL (optional, loads from env)
            supabase_key: Supabase service role key (optional, loads from env)
            **kwargs: Additional configuration options

        Returns:
            Initialized Sprintdesk client

        Raises:
            ValidationError: If required configuration is missing or invalid
        """
        config_kwargs = kwargs.copy()
        if supabase_url:
            config_kwargs["supabase_url"] = supabase_url
        if supabase_key:
            config_kwargs["supabase_key"] = supabase_key

        config = load_config(**config_kwargs)
        client = await SprintdeskSupabaseClient.create(config)

        return cls(config=config, client=client)

    async def close(self) -> None:
        """Close the Sprintdesk client and cleanup resources."""
        await self.client.close()

    async def __aenter__(self) -> "Sprintdesk":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
