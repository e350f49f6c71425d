"""
Tests for sprintdesk.integrations.fastapi module.
"""

import logging
from unittest.mock import AsyncMock, Mock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sprintdesk.integrations.fastapi import CORS_HEADERS, create_app, create_router
from sprintdesk.invitations import InviteRecord, InviteRepository, InviteTokenValidator


@pytest.fixture
def mock_repository():
    repository = Mock(spec=InviteRepository)
    repository.find_active_invite = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def client(mock_repository):
    app = FastAPI()
    app.include_router(create_router(lambda: InviteTokenValidator(mock_repository)))
    return TestClient(app)


def assert_cors(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


class TestValidateTokenEndpoint:
    """Tests for the validate-token endpoint."""

    def test_preflight(self, client):
        response = client.options("/validate-token")

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)

    def test_missing_token(self, client, mock_repository):
        response = client.post("/validate-token", json={"token": "", "user_type": "internal"})

        assert response.status_code == 400
        assert response.json() == {"valid": False, "error": "Missing parameters"}
        assert response.headers["content-type"] == "application/json"
        assert_cors(response)
        mock_repository.find_active_invite.assert_not_called()

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"token": "abc"},
            {"token": "abc", "user_type": "staff"},
            {"token": ["abc"], "user_type": "partner"},
            ["abc", "partner"],
            "token=abc",
        ],
    )
    def test_bad_parameters(self, client, body):
        response = client.post("/validate-token", json=body)

        assert response.status_code == 400
        assert response.json() == {"valid": False, "error": "Missing parameters"}

    def test_invalid_or_expired(self, client, sample_invite_token):
        response = client.post(
            "/validate-token", json={"token": sample_invite_token, "user_type": "partner"}
        )

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "Invalid or expired token"}
        assert_cors(response)

    def test_valid(self, client, mock_repository, sample_invite_data, sample_invite_token):
        mock_repository.find_active_invite.return_value = InviteRecord(
            **sample_invite_data, invite_token=sample_invite_token
        )

        response = client.post(
            "/validate-token", json={"token": sample_invite_token, "user_type": "internal"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["user"]["name"] == "Ana Souza"
        assert body["user"]["email"] == "ana@example.com"
        assert body["user"]["expires_at"].startswith("2024-01-08T12:00:00")
        assert sample_invite_token not in response.text
        assert sample_invite_data["id"] not in response.text
        assert "auth_id" not in response.text
        assert_cors(response)

    def test_backend_failure(self, client, mock_repository, sample_invite_token, caplog):
        mock_repository.find_active_invite.side_effect = ConnectionError("connection refused")

        with caplog.at_level(logging.DEBUG, logger="sprintdesk"):
            response = client.post(
                "/validate-token", json={"token": sample_invite_token, "user_type": "partner"}
            )

        assert response.status_code == 500
        assert response.json() == {"valid": False, "error": "connection refused"}
        assert_cors(response)
        assert sample_invite_token not in caplog.text

    def test_malformed_json(self, client):
        response = client.post(
            "/validate-token",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["valid"] is False
        assert body["error"]
        assert_cors(response)

    def test_fresh_validator_per_request(self, mock_repository):
        factory = Mock(side_effect=lambda: InviteTokenValidator(mock_repository))
        app = FastAPI()
        app.include_router(create_router(factory))
        client = TestClient(app)

        client.post("/validate-token", json={"token": "a", "user_type": "partner"})
        client.post("/validate-token", json={"token": "b", "user_type": "partner"})

        assert factory.call_count == 2


class TestCreateApp:
    """Tests for create_app."""

    def test_create_app_serves_route(self, mock_repository):
        app = create_app(lambda: InviteTokenValidator(mock_repository), log_format="text")
        client = TestClient(app)

        response = client.post("/validate-token", json={"token": "abc", "user_type": "internal"})

        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_create_app_from_config(self, sprintdesk_config, mock_sprintdesk_supabase_client):
        app = create_app(config=sprintdesk_config)

        with patch(
            'sprintdesk.invitations.repository.SprintdeskSupabaseClient.create',
            new_callable=AsyncMock,
            return_value=mock_sprintdesk_supabase_client,
        ) as mock_create:
            with TestClient(app) as client:
                response = client.post(
                    "/validate-token", json={"token": "abc", "user_type": "partner"}
                )

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "Invalid or expired token"}
        mock_create.assert_awaited_once_with(sprintdesk_config)
        # debug=True in the test config
        assert logging.getLogger().level == logging.DEBUG

    def test_supabase_client_shared_across_requests(
        self, sprintdesk_config, mock_sprintdesk_supabase_client, mock_supabase_client
    ):
        app = create_app(config=sprintdesk_config)

        with patch(
            'sprintdesk.invitations.repository.SprintdeskSupabaseClient.create',
            new_callable=AsyncMock,
            return_value=mock_sprintdesk_supabase_client,
        ) as mock_create:
            with TestClient(app) as client:
                for token in ("a", "b", "c"):
                    response = client.post(
                        "/validate-token", json={"token": token, "user_type": "internal"}
                    )
                    assert response.status_code == 200

                mock_supabase_client.aclose.assert_not_awaited()

        assert mock_create.await_count == 1
        # Shutdown releases the connection
        mock_supabase_client.aclose.assert_awaited_once()

    def test_router_uses_given_repository(self, mock_repository):
        app = FastAPI()
        app.include_router(create_router(repository=mock_repository))
        client = TestClient(app)

        client.post("/validate-token", json={"token": "a", "user_type": "partner"})
        client.post("/validate-token", json={"token": "b", "user_type": "partner"})

        assert mock_repository.find_active_invite.await_count == 2

    def test_missing_credentials_fail_closed(self):
        # Default factory reads credentials from the (cleaned) environment
        client = TestClient(create_app(log_format="text"))

        response = client.post(
            "/validate-token", json={"token": "abc", "user_type": "internal"}
        )

        assert response.status_code == 500
        assert response.json()["valid"] is False
        assert response.json()["error"]
