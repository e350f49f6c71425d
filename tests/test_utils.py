"""
Tests for sprintdesk.utils module.
"""

import pytest
from unittest.mock import AsyncMock, Mock, patch

from sprintdesk.utils.supabase import SprintdeskSupabaseClient


class TestSprintdeskSupabaseClient:
    """Tests for SprintdeskSupabaseClient class."""

    @pytest.mark.asyncio
    async def test_create_client(self, sprintdesk_config):
        """Test creating a SprintdeskSupabaseClient."""
        with patch('sprintdesk.utils.supabase.acreate_client', new_callable=AsyncMock) as mock_create:
            mock_client = Mock()
            mock_create.return_value = mock_client

            client = await SprintdeskSupabaseClient.create(sprintdesk_config)

            assert client.config == sprintdesk_config
            assert client._client == mock_client
            mock_create.assert_awaited_once()
            kwargs = mock_create.call_args.kwargs
            assert kwargs["supabase_url"] == "https://test.supabase.co"
            assert kwargs["supabase_key"] == sprintdesk_config.supabase_key

    def test_table_method(self, mock_sprintdesk_supabase_client):
        """Test table method."""
        query_builder = mock_sprintdesk_supabase_client.table("users_internal")
        assert query_builder is not None
        mock_sprintdesk_supabase_client._client.table.assert_called_with("users_internal")

    @pytest.mark.asyncio
    async def test_close_client(self, mock_sprintdesk_supabase_client, mock_supabase_client):
        """Test closing client releases the PostgREST session."""
        await mock_sprintdesk_supabase_client.close()

        mock_supabase_client.aclose.assert_awaited_once()
