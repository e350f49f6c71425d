"""
FastAPI application example with Sprintdesk integration.

Mounts the invitation token endpoint next to the application's own routes.

Run with:
    uvicorn examples.fastapi_app:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from sprintdesk.integrations.fastapi import create_router
from sprintdesk.invitations import SupabaseInviteRepository
from sprintdesk.observability import setup_logging

setup_logging("INFO", "text")

# One Supabase connection for every request, closed on shutdown
repository = SupabaseInviteRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await repository.close()


app = FastAPI(
    title="Sprintdesk Example API",
    description="Example API mounting Sprintdesk token validation",
    version="1.0.0",
    lifespan=lifespan,
)

# POST /functions/v1/validate-token {"token": "...", "user_type": "partner"}
app.include_router(create_router(repository=repository), prefix="/functions/v1")


@app.get("/health")
async def health():
    return {"status": "ok"}
