"""Repository registry for the table gateway.

Maps table names to TableRepository instances, built on first access and kept
for the process lifetime. The key space is operator-controlled table names, so
the cache is unbounded; entries leave only through evict() after a drop.
"""

import threading
from typing import Dict

from supabase import AsyncClient

from dbgateway.core.logging import logger
from dbgateway.infrastructure.database.models import Row
from dbgateway.infrastructure.database.repositories.table import TableRepository

# Read-only view behind list_tables; never a key in the table cache
CATALOG_VIEW = "information_schema.tables"


class RepositoryRegistry:
    """Table name -> repository cache sharing one Supabase client."""

    def __init__(self, client: AsyncClient):
        self._client = client
        self._repositories: Dict[str, TableRepository[Row]] = {}
        self._lock = threading.Lock()
        self._catalog = TableRepository(CATALOG_VIEW, client)

    def resolve(self, table_name: str) -> TableRepository[Row]:
        """Return the repository for a table, creating it on first reference."""
        repository = self._repositories.get(table_name)
        if repository is not None:
            return repository

        with self._lock:
            repository = self._repositories.get(table_name)
            if repository is None:
                repository = self._repositories.setdefault(
                    table_name, TableRepository(table_name, self._client)
                )
                logger.debug("repository_created", table=table_name)
        return repository

    @property
    def catalog(self) -> TableRepository[Row]:
        """Repository for schema-wide lookups, kept outside the name cache."""
        return self._catalog

    def evict(self, table_name: str) -> None:
        """Forget the repository for a table. Backend state is untouched."""
        with self._lock:
            if self._repositories.pop(table_name, None) is not None:
                logger.debug("repository_evicted", table=table_name)

    def __contains__(self, table_name: str) -> bool:
        return table_name in self._repositories

    def __len__(self) -> int:
        return len(self._repositories)
