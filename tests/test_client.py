"""
Tests for sprintdesk.client module.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sprintdesk.client import Sprintdesk
from sprintdesk.invitations import InviteTokenValidator, SupabaseInviteRepository


class TestSprintdesk:
    """Tests for Sprintdesk client class."""

    @pytest.mark.asyncio
    async def test_create_with_kwargs(self, mock_sprintdesk_supabase_client):
        """Test creating Sprintdesk instance with kwargs."""
        with patch(
            'sprintdesk.client.SprintdeskSupabaseClient.create',
            new_callable=AsyncMock,
            return_value=mock_sprintdesk_supabase_client,
        ):
            sprintdesk = await Sprintdesk.create(
                supabase_url="https://test.supabase.co",
                supabase_key="test-key-12345678901234567890"
            )

            assert sprintdesk.config.supabase_url == "https://test.supabase.co"
            assert sprintdesk.config.supabase_key == "test-key-12345678901234567890"
            assert sprintdesk.client is mock_sprintdesk_supabase_client

    def test_initialization(self, sprintdesk):
        """Test Sprintdesk instance initialization."""
        assert sprintdesk.config is not None
        assert sprintdesk.client is not None
        assert isinstance(sprintdesk.invites, InviteTokenValidator)
        assert isinstance(sprintdesk.invites.repository, SupabaseInviteRepository)

    @pytest.mark.asyncio
    async def test_context_manager(self, sprintdesk):
        """Test Sprintdesk as context manager."""
        async with sprintdesk as s:
            assert s is sprintdesk

    @pytest.mark.asyncio
    async def test_close(self, sprintdesk):
        """Test closing Sprintdesk client."""
        sprintdesk.client.close = AsyncMock()

        await sprintdesk.close()

        sprintdesk.client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_context_manager_exit(self, sprintdesk):
        """Test context manager exit calls close."""
        sprintdesk.close = AsyncMock()

        async with sprintdesk:
            pass

        sprintdesk.close.assert_called_once()
