"""SQL statement synthesis for table management.

Statements are executed through the `execute_sql` stored procedure, so every
statement here is a plain string plus positional parameters.
"""

from typing import Optional

from dbgateway.infrastructure.database.models import ColumnDefinition, TableSchema

LIST_TABLES_SQL = (
    "SELECT table_name FROM information_schema.tables WHERE table_schema = 'public'"
)

TABLE_EXISTS_SQL = (
    "SELECT EXISTS ("
    "SELECT FROM information_schema.tables "
    "WHERE table_schema = 'public' AND table_name = $1"
    ")"
)


def column_definition(column: ColumnDefinition, primary_key: Optional[str] = None) -> str:
    """Render `name type constraint...` for one column."""
    constraints = list(column.constraints)
    if primary_key == column.name:
        constraints.append("PRIMARY KEY")
    return " ".join([column.name, column.type, *constraints])


def build_create_table_sql(schema: TableSchema) -> str:
    """Build a CREATE TABLE IF NOT EXISTS statement from a schema.

    Foreign keys are appended after the column list only when present.

    Example:
        >>> build_create_table_sql(TableSchema(
        ...     name="users",
        ...     columns=[{"name": "id", "type": "uuid"}, {"name": "email", "type": "text"}],
        ...     primaryKey="id",
        ... ))
        'CREATE TABLE IF NOT EXISTS users (id uuid PRIMARY KEY, email text)'
    """
    parts = [column_definition(col, schema.primary_key) for col in schema.columns]
    parts.extend(
        f"FOREIGN KEY ({fk.column}) REFERENCES {fk.references.table}({fk.references.column})"
        for fk in schema.foreign_keys
    )
    return f"CREATE TABLE IF NOT EXISTS {schema.name} ({', '.join(parts)})"


def build_drop_table_sql(table_name: str) -> str:
    return f"DROP TABLE IF EXISTS {table_name}"
