"""Request models for the table gateway."""

from typing import Optional

from pydantic import BaseModel, Field

from dbgateway.infrastructure.database.models import TableSchema


class CreateTableRequest(BaseModel):
    """Request for POST /tables."""

    table_name: Optional[str] = Field(None, alias="tableName")
    table_schema: Optional[TableSchema] = Field(None, alias="schema")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "tableName": "users",
                    "schema": {
                        "name": "users",
                        "columns": [
                            {"name": "id", "type": "uuid"},
                            {"name": "email", "type": "text", "constraints": ["NOT NULL"]},
                        ],
                        "primaryKey": "id",
                    },
                }
            ]
        },
    }
