"""Supabase client provider for the table gateway.

One authenticated async client per process, shared by every repository.
First-call construction is serialized with an asyncio.Lock, and only a fully
built instance is ever cached.
"""

import asyncio
from typing import Optional

from supabase import AsyncClient, AsyncClientOptions, AsyncSupabaseException, acreate_client

from dbgateway.config import config
from dbgateway.core.errors import ConfigurationError
from dbgateway.core.logging import logger


class SupabaseClient:
    """Singleton owner of the shared Supabase handle."""

    _instance: Optional["SupabaseClient"] = None
    _lock = asyncio.Lock()

    def __init__(self, client: AsyncClient):
        self._client = client

    @classmethod
    async def get_instance(cls) -> "SupabaseClient":
        """Get or create the singleton instance.

        Raises:
            ConfigurationError: SUPABASE_URL or SUPABASE_KEY is absent or empty
        """
        if cls._instance is not None:
            return cls._instance

        async with cls._lock:
            if cls._instance is None:
                cls._instance = await cls._build()
            return cls._instance

    @classmethod
    async def _build(cls) -> "SupabaseClient":
        url = config.supabase_url()
        key = config.supabase_key()

        if not url or not key:
            logger.error("supabase_configuration_missing", missing=config.get_missing_config())
            raise ConfigurationError()

        # Stateless server-side client: no session persistence, public schema
        options = AsyncClientOptions(
            schema="public",
            persist_session=False,
            auto_refresh_token=False,
        )

        try:
            client = await acreate_client(url, key, options=options)
        except AsyncSupabaseException as e:
            logger.error("supabase_configuration_invalid", error=str(e))
            raise ConfigurationError(str(e)) from e

        logger.info("supabase_client_initialized", url=url)
        return cls(client)

    def get_client(self) -> AsyncClient:
        """Return the shared handle."""
        return self._client

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance. Used by tests and process re-initialization."""
        cls._instance = None
        cls._lock = asyncio.Lock()
