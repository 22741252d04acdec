"""Table routes for the table gateway.

Each handler resolves one repository through the registry, invokes exactly one
repository operation and wraps the result in the success envelope. Failures are
raised and rendered by the exception handlers in api.middleware.
"""

import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError as PydanticValidationError

from dbgateway.api.dependencies import get_registry
from dbgateway.api.models import CreateTableRequest, success
from dbgateway.core.errors import ValidationError
from dbgateway.infrastructure.database import QueryOptions, RepositoryRegistry
from dbgateway.infrastructure.database.models import FilterMap
from dbgateway.infrastructure.database.repositories.table import active_filters

router = APIRouter(prefix="/tables", tags=["Tables"])

FILTER_HELP = "JSON object of column equality filters"


def _parse_json_param(raw: Optional[str], name: str) -> Optional[Any]:
    """Decode a query-string-encoded JSON value."""
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in '{name}' parameter: {e.msg}") from e


def parse_filter(raw: Optional[str]) -> FilterMap:
    value = _parse_json_param(raw, "filter")
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("'filter' must be a JSON object")
    return value


def parse_pagination(raw: Optional[str]) -> Optional[QueryOptions]:
    value = _parse_json_param(raw, "pagination")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValidationError("'pagination' must be a JSON object")
    try:
        return QueryOptions.model_validate(value)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid 'pagination' parameter: {e.errors()[0]['msg']}") from e


# Table management


@router.post("", status_code=201)
async def create_table(
    body: Optional[CreateTableRequest] = Body(None),
    registry: RepositoryRegistry = Depends(get_registry),
):
    """Create a table from a schema description.

    - **tableName**: registry key for the repository
    - **schema**: name, columns, optional primaryKey and foreignKeys
    """
    if body is None or not body.table_name or body.table_schema is None:
        raise ValidationError("Table name and schema are required")

    repository = registry.resolve(body.table_name)
    await repository.create_table(body.table_schema)

    return success({"tableName": body.table_name})


@router.get("")
async def list_tables(registry: RepositoryRegistry = Depends(get_registry)):
    """List the tables of the public schema."""
    return success(await registry.catalog.list_tables())


@router.delete("/{table_name}")
async def drop_table(table_name: str, registry: RepositoryRegistry = Depends(get_registry)):
    """Drop a table and forget its repository."""
    repository = registry.resolve(table_name)
    await repository.drop_table()
    registry.evict(table_name)

    return success({"tableName": table_name})


@router.get("/{table_name}/exists")
async def table_has_rows(table_name: str, registry: RepositoryRegistry = Depends(get_registry)):
    """True when the table contains at least one row."""
    repository = registry.resolve(table_name)
    return success({"exists": await repository.exists({})})


@router.get("/{table_name}/catalog")
async def table_in_catalog(table_name: str, registry: RepositoryRegistry = Depends(get_registry)):
    """True when the table exists in the public schema catalog."""
    repository = registry.resolve(table_name)
    return success({"exists": await repository.table_exists()})


@router.get("/{table_name}/count")
async def count_rows(
    table_name: str,
    filter_: Optional[str] = Query(None, alias="filter", description=FILTER_HELP),
    registry: RepositoryRegistry = Depends(get_registry),
):
    filters = parse_filter(filter_)
    repository = registry.resolve(table_name)
    return success({"count": await repository.count(filters)})


# Row operations


@router.post("/{table_name}/data")
async def upsert_row(
    table_name: str,
    data: Optional[Dict[str, Any]] = Body(None),
    on_conflict: Optional[str] = Query(None, alias="onConflict"),
    registry: RepositoryRegistry = Depends(get_registry),
):
    """Insert a row, or update it when it conflicts on `onConflict`."""
    if not data:
        raise ValidationError("Table name and data are required")

    repository = registry.resolve(table_name)
    return success(await repository.upsert(data, on_conflict))


@router.post("/{table_name}/data/insert", status_code=201)
async def insert_row(
    table_name: str,
    data: Optional[Dict[str, Any]] = Body(None),
    registry: RepositoryRegistry = Depends(get_registry),
):
    """Insert a row; conflicts are reported as errors."""
    if not data:
        raise ValidationError("Table name and data are required")

    repository = registry.resolve(table_name)
    return success(await repository.create(data))


@router.get("/{table_name}/data")
async def get_rows(
    table_name: str,
    filter_: Optional[str] = Query(None, alias="filter", description=FILTER_HELP),
    pagination: Optional[str] = Query(
        None, description="JSON object with limit, offset, orderBy and select"
    ),
    registry: RepositoryRegistry = Depends(get_registry),
):
    filters = parse_filter(filter_)
    options = parse_pagination(pagination)

    repository = registry.resolve(table_name)
    return success(await repository.get(filters, options))


@router.patch("/{table_name}/data")
async def patch_rows(
    table_name: str,
    data: Optional[Dict[str, Any]] = Body(None),
    filter_: Optional[str] = Query(None, alias="filter", description=FILTER_HELP),
    registry: RepositoryRegistry = Depends(get_registry),
):
    """Partially update the row matching the filter."""
    if not data:
        raise ValidationError("Table name and data are required")

    filters = parse_filter(filter_)
    if not active_filters(filters):
        raise ValidationError("Filter is required")

    repository = registry.resolve(table_name)
    return success(await repository.patch(data, filters))


@router.delete("/{table_name}/data/{row_id}")
async def delete_row(
    table_name: str, row_id: str, registry: RepositoryRegistry = Depends(get_registry)
):
    if not row_id.strip():
        raise ValidationError("Table name and ID are required")

    repository = registry.resolve(table_name)
    await repository.delete({"id": row_id})

    return success(None)
