"""Generic table repository for the table gateway.

Bound to one table name at construction; translates filter maps, query options
and table schemas into PostgREST calls on the shared Supabase client. Every
backend failure surfaces as BackendError with the backend message unchanged.
"""

from typing import Any, List, Optional, Sequence, Tuple

import httpx
from postgrest import APIError
from postgrest.types import CountMethod, ReturnMethod
from supabase import AsyncClient

from dbgateway.core.errors import BackendError
from dbgateway.core.logging import logger
from dbgateway.infrastructure.database.models import FilterMap, QueryOptions, Row, TableSchema
from dbgateway.infrastructure.database.repositories.base import BaseRepository, T
from dbgateway.infrastructure.database.schema import (
    LIST_TABLES_SQL,
    TABLE_EXISTS_SQL,
    build_create_table_sql,
    build_drop_table_sql,
)

EXECUTE_SQL_FUNCTION = "execute_sql"

# Upper bound for the row range when offset is given without limit
DEFAULT_RANGE_LIMIT = 10


def row_range(options: QueryOptions) -> Optional[Tuple[int, int]]:
    """Inclusive [start, end] row range for the options, or None if offset is unset.

    Examples:
        limit=5, offset=20 -> (20, 24)
        offset=3           -> (3, 12)
    """
    if not options.offset:
        return None
    return options.offset, options.offset + (options.limit or DEFAULT_RANGE_LIMIT) - 1


def active_filters(filters: Optional[FilterMap]) -> FilterMap:
    """Filter entries that become predicates: everything except None values."""
    return {column: value for column, value in (filters or {}).items() if value is not None}


def apply_filters(builder, filters: Optional[FilterMap]):
    """Add one equality predicate per filter entry. None values are skipped."""
    for column, value in active_filters(filters).items():
        builder = builder.eq(column, value)
    return builder


class TableRepository(BaseRepository[T]):
    """Uniform CRUD and DDL surface over a single Supabase table.

    Stateless across calls: holds only the table name and a shared client handle.
    """

    def __init__(self, table_name: str, client: AsyncClient):
        self._table_name = table_name
        self._client = client

    @property
    def table_name(self) -> str:
        return self._table_name

    def _table(self):
        return self._client.table(self._table_name)

    async def _execute(self, operation: str, builder) -> Any:
        """Run a built request, normalizing backend failures to BackendError."""
        try:
            return await builder.execute()
        except (APIError, httpx.HTTPError) as e:
            error = BackendError.from_exception(e)
            logger.error(
                "backend_operation_failed",
                table=self._table_name,
                operation=operation,
                error=error.message,
                code=error.code,
            )
            raise error from e

    async def get(
        self, filters: Optional[FilterMap] = None, options: Optional[QueryOptions] = None
    ) -> List[T]:
        """Read rows matching every filter entry.

        Args:
            filters: Column -> equality value (conjunctive)
            options: limit, offset, order_by and select projection

        Returns:
            List of rows, empty when nothing matched
        """
        options = options or QueryOptions()

        builder = self._table().select(options.select or "*")
        builder = apply_filters(builder, filters)

        if options.order_by:
            builder = builder.order(options.order_by.column, desc=not options.order_by.ascending)

        # range() sets both offset and limit, so it takes the place of a plain limit
        page = row_range(options)
        if page:
            builder = builder.range(*page)
        elif options.limit:
            builder = builder.limit(options.limit)

        response = await self._execute("get", builder)
        return list(response.data or [])

    async def create(self, data: T) -> T:
        """Insert one row and return the inserted representation."""
        builder = self._table().insert(data, returning=ReturnMethod.representation)
        response = await self._execute("create", builder)
        return _first_row(response.data)

    async def patch(self, data: FilterMap, filters: FilterMap) -> Optional[T]:
        """Apply a partial update to the rows matching the filters.

        The async builder has no single-object mode after update(), so a match
        on several rows updates all of them and returns the first one. Zero
        matches return None instead of raising.
        """
        builder = self._table().update(data, returning=ReturnMethod.representation)
        builder = apply_filters(builder, filters)
        response = await self._execute("patch", builder)
        return _first_row(response.data)

    async def upsert(self, data: T, on_conflict: Optional[str] = None) -> T:
        """Insert the row, or update it on conflict of the given column/constraint."""
        builder = self._table().upsert(
            data, on_conflict=on_conflict or "", returning=ReturnMethod.representation
        )
        response = await self._execute("upsert", builder)
        return _first_row(response.data)

    async def delete(self, filters: FilterMap) -> bool:
        """Delete the matching rows. True regardless of how many rows were removed."""
        builder = apply_filters(self._table().delete(returning=ReturnMethod.minimal), filters)
        await self._execute("delete", builder)
        return True

    async def query(self, raw_query: str, params: Optional[Sequence] = None) -> List[T]:
        """Execute a raw statement through the execute_sql stored procedure.

        Parameters are passed positionally ($1, $2, ...) and never interpolated.
        The statement text itself is not validated here.
        """
        builder = self._client.rpc(
            EXECUTE_SQL_FUNCTION, {"query": raw_query, "params": list(params or [])}
        )
        response = await self._execute("query", builder)

        data = response.data
        if data is None:
            return []
        return data if isinstance(data, list) else [data]

    async def count(self, filters: Optional[FilterMap] = None) -> int:
        """Exact count of matching rows, 0 when the backend reports none."""
        builder = self._table().select("*", count=CountMethod.exact, head=True)
        builder = apply_filters(builder, filters)
        response = await self._execute("count", builder)
        return response.count or 0

    async def create_table(self, schema: TableSchema) -> None:
        statement = build_create_table_sql(schema)
        await self.query(statement)
        logger.info("table_created", table=schema.name)

    async def drop_table(self) -> None:
        """Drop the bound table. The caller evicts this repository from the registry."""
        await self.query(build_drop_table_sql(self._table_name))
        logger.info("table_dropped", table=self._table_name)

    async def list_tables(self) -> List[str]:
        rows = await self.query(LIST_TABLES_SQL)
        return [row["table_name"] for row in rows]

    async def table_exists(self) -> bool:
        rows = await self.query(TABLE_EXISTS_SQL, [self._table_name])
        if not rows:
            return False
        return bool(rows[0].get("exists"))


def _first_row(data: Any) -> Optional[Row]:
    if isinstance(data, list):
        return data[0] if data else None
    return data
