"""
FastAPI integration for Sprintdesk.

Exposes invitation token validation over HTTP for the activation page.

Example:
    ```python
    from fastapi import FastAPI
    from sprintdesk.integrations.fastapi import create_router

    app = FastAPI()
    app.include_router(create_router())
    ```

    Request:  POST /validate-token  {"token": "...", "user_type": "partner"}
    Response: {"valid": true, "user": {"name": ..., "email": ..., "expires_at": ...}}
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, Optional

try:
    from fastapi import APIRouter, FastAPI, Request, Response
    from fastapi.responses import JSONResponse
except ImportError:
    raise ImportError(
        "FastAPI is required for this integration. "
        "Install it with: pip install fastapi"
    )

from ..config import SprintdeskConfig
from ..invitations import (
    InviteRepository,
    InviteTokenValidator,
    SupabaseInviteRepository,
)
from ..observability import setup_logging

logger = logging.getLogger(__name__)

# The endpoint is called straight from the browser
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

ValidatorFactory = Callable[[], InviteTokenValidator]


def shared_validator_factory(repository: InviteRepository) -> ValidatorFactory:
    """
    Build a validator factory whose validators share one repository.

    Each request still gets its own validator; only the store connection
    is reused.
    """

    def factory() -> InviteTokenValidator:
        return InviteTokenValidator(repository)

    return factory


def _json_response(body: Dict[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


def create_router(
    validator_factory: Optional[ValidatorFactory] = None,
    path: str = "/validate-token",
    repository: Optional[InviteRepository] = None,
) -> APIRouter:
    """
    Create the router serving token validation.

    A fresh validator is built per request; requests share no state beyond
    the store connection.

    Args:
        validator_factory: Returns the validator to use
        path: Route path
        repository: Store used when no factory is given. Defaults to a
            Supabase repository whose credentials are read from the
            environment on first lookup, so a missing service role key turns
            into a 500 response instead of a startup crash. Pass your own to
            close it on shutdown.

    Returns:
        APIRouter with OPTIONS and POST handlers on path
    """
    if validator_factory is None:
        validator_factory = shared_validator_factory(
            repository or SupabaseInviteRepository()
        )
    router = APIRouter()

    @router.options(path)
    async def validate_token_preflight() -> Response:
        return Response(status_code=200, headers=CORS_HEADERS)

    @router.post(path)
    async def validate_token(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError as e:
            logger.error("Unreadable validate-token request body: %s", e)
            return _json_response({"valid": False, "error": str(e)}, 500)

        if not isinstance(payload, dict):
            payload = {}

        result = await validator_factory().validate(
            payload.get("token"),
            payload.get("user_type"),
        )
        return _json_response(result.to_response(), result.status_code)

    return router


def create_app(
    validator_factory: Optional[ValidatorFactory] = None,
    log_level: str = "INFO",
    log_format: str = "json",
    config: Optional[SprintdeskConfig] = None,
) -> FastAPI:
    """
    Create a standalone FastAPI application serving token validation.

    Without a validator_factory the app owns one Supabase repository, created
    on the first request and closed on shutdown.

    Args:
        validator_factory: Returns the validator to use (defaults to Supabase)
        log_level: Root log level, when no config is given
        log_format: "json" or "text", when no config is given
        config: Loaded configuration; supplies logging settings and credentials

    Example:
        ```python
        # uvicorn --factory sprintdesk.integrations.fastapi:create_app
        app = create_app(log_format="text")
        ```
    """
    if config is not None:
        setup_logging(config.effective_log_level, config.log_format)
    else:
        setup_logging(log_level, log_format)

    repository: Optional[InviteRepository] = None
    if validator_factory is None:
        repository = SupabaseInviteRepository(config=config)
        validator_factory = shared_validator_factory(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if repository is not None:
            await repository.close()

    app = FastAPI(
        title="Sprintdesk",
        description="Invitation token validation",
        lifespan=lifespan,
    )
    app.include_router(create_router(validator_factory))
    return app
