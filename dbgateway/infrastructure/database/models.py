"""Database models for the table gateway.

Rows are type-erased mappings; options and schemas are pydantic models that
accept both the camelCase wire names and snake_case attribute names.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# Column name -> value. The gateway never interprets field semantics.
Row = Dict[str, JSONValue]

# Column name -> equality value. None entries are dropped, never matched as NULL.
FilterMap = Dict[str, JSONValue]


class OrderBy(BaseModel):
    """Ordering for a read."""

    model_config = ConfigDict(populate_by_name=True)

    column: str
    ascending: bool = True


class QueryOptions(BaseModel):
    """Pagination, ordering and projection for `get`.

    Every field is optional; absence means backend default.
    """

    model_config = ConfigDict(populate_by_name=True)

    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)
    order_by: Optional[OrderBy] = Field(None, alias="orderBy")
    select: Optional[str] = None


class ColumnDefinition(BaseModel):
    """One column of a CREATE TABLE statement."""

    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    constraints: List[str] = Field(default_factory=list)


class ForeignKeyReference(BaseModel):
    table: str
    column: str


class ForeignKey(BaseModel):
    column: str
    references: ForeignKeyReference


class TableSchema(BaseModel):
    """Table description used only for DDL synthesis."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    columns: List[ColumnDefinition] = Field(..., min_length=1)
    primary_key: Optional[str] = Field(None, alias="primaryKey")
    foreign_keys: List[ForeignKey] = Field(default_factory=list, alias="foreignKeys")
