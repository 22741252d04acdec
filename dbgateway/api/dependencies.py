"""FastAPI dependencies for the table gateway.

Dependency injection functions for route handlers.
"""

from fastapi import Request

from dbgateway.infrastructure.database import RepositoryRegistry


def get_registry(request: Request) -> RepositoryRegistry:
    """Get the repository registry from app state.

    Note:
        Set once at startup by the app lifespan (or passed to create_app in tests).
    """
    return request.app.state.registry
