"""
Sprintdesk framework integrations.

Provides adapters for web frameworks.
"""

# FastAPI adapter is imported conditionally to avoid requiring fastapi
# as a hard dependency

__all__ = []

try:
    from .fastapi import CORS_HEADERS, create_app, create_router

    __all__.extend(["CORS_HEADERS", "create_app", "create_router"])
except ImportError:
    pass
