"""Database module for the table gateway.

Provides the Supabase client singleton, the generic table repository and the
table-name registry.
"""

from dbgateway.infrastructure.database.client import SupabaseClient
from dbgateway.infrastructure.database.models import (
    ColumnDefinition,
    FilterMap,
    ForeignKey,
    OrderBy,
    QueryOptions,
    Row,
    TableSchema,
)
from dbgateway.infrastructure.database.registry import RepositoryRegistry
from dbgateway.infrastructure.database.repositories import BaseRepository, TableRepository

__all__ = [
    "SupabaseClient",
    "ColumnDefinition",
    "FilterMap",
    "ForeignKey",
    "OrderBy",
    "QueryOptions",
    "Row",
    "TableSchema",
    "RepositoryRegistry",
    "BaseRepository",
    "TableRepository",
]
