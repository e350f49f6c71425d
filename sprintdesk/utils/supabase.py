"""
Supabase client wrapper for Sprintdesk.

Provides a thin wrapper around the Supabase AsyncClient configured with the
service role key. The key grants elevated access and must stay server-side.
"""

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions
from supabase_auth import AsyncMemoryStorage

from ..config import SprintdeskConfig


class SprintdeskSupabaseClient:
    """
    Wrapper around Supabase AsyncClient with Sprintdesk-specific configuration.

    This class provides:
    1. Configured client with service role key
    2. Access to database queries for the user partition tables
    3. Proper schema configuration

    Example:
        ```python
        from sprintdesk.utils.supabase import SprintdeskSupabaseClient
        from sprintdesk.config import SprintdeskConfig

        config = SprintdeskConfig()
        client = await SprintdeskSupabaseClient.create(config)

        result = await client.table("users_internal").select("id, name").execute()
        ```
    """

    def __init__(self, config: SprintdeskConfig, client: AsyncClient) -> None:
        """
        Initialize the Sprintdesk Supabase client.

        Args:
            config: Sprintdesk configuration
            client: Initialized Supabase AsyncClient

        Note:
            Use SprintdeskSupabaseClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    async def create(cls, config: SprintdeskConfig) -> "SprintdeskSupabaseClient":
        """
        Create and initialize a SprintdeskSupabaseClient.

        Sessions are kept in memory and never refreshed: the service role
        key is a static credential.

        Args:
            config: Sprintdesk configuration with Supabase credentials

        Returns:
            Initialized SprintdeskSupabaseClient
        """
        options = AsyncClientOptions(
            schema=config.db_schema,
            storage=AsyncMemoryStorage(),
            auto_refresh_token=False,
            persist_session=False,
            headers={
                "apikey": config.supabase_key,
                "Authorization": f"Bearer {config.supabase_key}",
            },
        )

        client = await acreate_client(
            supabase_url=config.supabase_url,
            supabase_key=config.supabase_key,
            options=options,
        )

        return cls(config=config, client=client)

    def table(self, table_name: str):
        """
        Create a query builder for a specific table.

        Args:
            table_name: Name of the table (e.g., "users_partner")

        Returns:
            AsyncRequestBuilder for chaining queries

        Example:
            ```python
            result = await client.table("users_partner").select(
                "id, name, email"
            ).eq("invite_token", token).execute()
            ```
        """
        return self._client.table(table_name)

    async def close(self) -> None:
        """
        Close the client and cleanup resources.

        Releases the PostgREST HTTP session; the other Supabase sub-clients
        are never used with the service role key.
        """
        await self._client.postgrest.aclose()
