"""Base repository interface for the table gateway.

Implements Repository pattern with Dependency Inversion principle.
Route handlers depend on this contract, not on a concrete backend.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from dbgateway.infrastructure.database.models import FilterMap, QueryOptions, TableSchema

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract table repository: CRUD, counting and table management for one table."""

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""

    @abstractmethod
    async def get(
        self, filters: Optional[FilterMap] = None, options: Optional[QueryOptions] = None
    ) -> List[T]:
        ...

    @abstractmethod
    async def create(self, data: T) -> T:
        ...

    @abstractmethod
    async def patch(self, data: FilterMap, filters: FilterMap) -> Optional[T]:
        ...

    @abstractmethod
    async def upsert(self, data: T, on_conflict: Optional[str] = None) -> T:
        ...

    @abstractmethod
    async def delete(self, filters: FilterMap) -> bool:
        ...

    @abstractmethod
    async def query(self, raw_query: str, params: Optional[Sequence] = None) -> List[T]:
        ...

    @abstractmethod
    async def count(self, filters: Optional[FilterMap] = None) -> int:
        ...

    async def exists(self, filters: FilterMap) -> bool:
        """True when at least one row matches the filters."""
        return await self.count(filters) > 0

    # Table management
    @abstractmethod
    async def create_table(self, schema: TableSchema) -> None:
        ...

    @abstractmethod
    async def drop_table(self) -> None:
        ...

    @abstractmethod
    async def list_tables(self) -> List[str]:
        ...

    @abstractmethod
    async def table_exists(self) -> bool:
        ...
