"""
Pytest configuration and fixtures for Sprintdesk tests.

Provides mock Supabase client and test fixtures.
"""

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from sprintdesk.client import Sprintdesk
from sprintdesk.config import SprintdeskConfig
from sprintdesk.utils.supabase import SprintdeskSupabaseClient

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

SUPABASE_ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SPRINTDESK_SUPABASE_URL",
    "SPRINTDESK_SUPABASE_KEY",
)


@pytest.fixture(autouse=True)
def clean_supabase_env(monkeypatch):
    """Keep credentials from the developer's shell out of the tests."""
    for name in SUPABASE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging calls made by the CLI and app factory."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == "sprintdesk":
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    client = AsyncMock()

    # Store query builders by table name so we can configure them
    query_builders = {}

    # Mock table method that returns a query builder
    def table_mock(table_name: str):
        # Return existing query builder if we've seen this table before
        if table_name not in query_builders:
            query_builder = Mock()
            # Make all methods return self for chaining
            query_builder.select = Mock(return_value=query_builder)
            query_builder.eq = Mock(return_value=query_builder)
            query_builder.gt = Mock(return_value=query_builder)
            query_builder.is_ = Mock(return_value=query_builder)
            query_builder.limit = Mock(return_value=query_builder)
            # Default execute returns empty result
            query_builder.execute = AsyncMock(return_value=Mock(data=[], count=0))
            query_builders[table_name] = query_builder
        return query_builders[table_name]

    client.table = Mock(side_effect=table_mock)
    client.postgrest = client
    client._query_builders = query_builders  # Expose for test configuration

    return client


@pytest.fixture
def sprintdesk_config():
    """Create a test SprintdeskConfig."""
    return SprintdeskConfig(
        supabase_url="https://test.supabase.co",
        supabase_key="test-service-key-12345678901234567890",
        db_schema="public",
        debug=True,
    )


@pytest.fixture
def mock_sprintdesk_supabase_client(mock_supabase_client, sprintdesk_config):
    """Create a mock SprintdeskSupabaseClient."""
    return SprintdeskSupabaseClient(config=sprintdesk_config, client=mock_supabase_client)


@pytest.fixture
def sprintdesk(mock_sprintdesk_supabase_client, sprintdesk_config):
    """Create a test Sprintdesk instance."""
    return Sprintdesk(config=sprintdesk_config, client=mock_sprintdesk_supabase_client)


def setup_table_mock(client, table_name, execute_return_value=None, side_effect=None):
    """
    Configure what execute() returns for a table.

    Args:
        client: SprintdeskSupabaseClient wrapping the mock
        table_name: Name of the table
        execute_return_value: Mock result to return from execute()
        side_effect: Exception to raise from execute() instead

    Returns:
        The query builder, for asserting on the calls made
    """
    query_builder = client._client.table(table_name)
    query_builder.execute = AsyncMock(
        return_value=execute_return_value, side_effect=side_effect
    )
    return query_builder


@pytest.fixture
def sample_invite_token():
    return "inv-7Yq2c9XkP4mZ"


@pytest.fixture
def sample_invite_data():
    """Row as returned by the invite lookup (no token, no auth_id)."""
    return {
        "id": str(uuid4()),
        "name": "Ana Souza",
        "email": "ana@example.com",
        "invite_expires_at": (FIXED_NOW + timedelta(days=7)).isoformat(),
    }
