"""FastAPI application factory for the table gateway."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from dbgateway.api.middleware import register_exception_handlers, request_id_middleware
from dbgateway.api.routes import system, tables
from dbgateway.config import config
from dbgateway.core.logging import logger
from dbgateway.infrastructure.database import RepositoryRegistry, SupabaseClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared Supabase client and registry once, before serving requests.

    Missing credentials raise ConfigurationError here and abort startup.
    """
    if getattr(app.state, "registry", None) is None:
        provider = await SupabaseClient.get_instance()
        app.state.registry = RepositoryRegistry(provider.get_client())
    logger.info("gateway_started", environment=config.environment())
    yield


def create_app(registry: Optional[RepositoryRegistry] = None) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability."""
    app = FastAPI(
        title="supabase-table-gateway",
        description=(
            "Table-agnostic data access over Supabase: CRUD, filtering, pagination, "
            "counting and table management for any table addressed by name."
        ),
        version="1.0.0",
        docs_url=config.docs_path(),
        redoc_url=None,
        lifespan=lifespan,
    )

    # Pre-built registry (tests, embedding) skips client construction in lifespan
    app.state.registry = registry

    # Add middleware
    app.middleware("http")(request_id_middleware)
    register_exception_handlers(app)

    # Register routes
    app.include_router(system.router)
    app.include_router(tables.router, prefix=f"{config.api_prefix()}/supabase")

    return app
