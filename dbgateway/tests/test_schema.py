"""Unit tests for CREATE/DROP TABLE synthesis."""

from dbgateway.infrastructure.database import TableSchema
from dbgateway.infrastructure.database.schema import (
    build_create_table_sql,
    build_drop_table_sql,
    column_definition,
)


def users_schema(**overrides) -> TableSchema:
    payload = {
        "name": "users",
        "columns": [{"name": "id", "type": "uuid"}, {"name": "email", "type": "text"}],
        "primaryKey": "id",
    }
    payload.update(overrides)
    return TableSchema.model_validate(payload)


class TestCreateTableSql:
    """Test build_create_table_sql."""

    def test_primary_key_appended_to_column(self):
        """Test primary key column renders as `id uuid PRIMARY KEY`."""
        sql = build_create_table_sql(users_schema())

        assert "id uuid PRIMARY KEY" in sql
        assert sql == "CREATE TABLE IF NOT EXISTS users (id uuid PRIMARY KEY, email text)"

    def test_no_trailing_comma_without_foreign_keys(self):
        """Test column list is closed cleanly when foreignKeys is absent."""
        sql = build_create_table_sql(users_schema())

        assert ", )" not in sql
        assert ",)" not in sql
        assert "FOREIGN KEY" not in sql

    def test_foreign_key_appended_after_columns(self):
        """Test foreign key clause is comma-separated from the column list."""
        schema = users_schema(
            columns=[
                {"name": "id", "type": "uuid"},
                {"name": "org_id", "type": "uuid"},
            ],
            foreignKeys=[{"column": "org_id", "references": {"table": "orgs", "column": "id"}}],
        )

        sql = build_create_table_sql(schema)

        assert sql.endswith("org_id uuid, FOREIGN KEY (org_id) REFERENCES orgs(id))")

    def test_multiple_foreign_keys_are_comma_joined(self):
        schema = users_schema(
            columns=[
                {"name": "id", "type": "uuid"},
                {"name": "org_id", "type": "uuid"},
                {"name": "team_id", "type": "uuid"},
            ],
            foreignKeys=[
                {"column": "org_id", "references": {"table": "orgs", "column": "id"}},
                {"column": "team_id", "references": {"table": "teams", "column": "id"}},
            ],
        )

        sql = build_create_table_sql(schema)

        assert (
            "FOREIGN KEY (org_id) REFERENCES orgs(id), FOREIGN KEY (team_id) REFERENCES teams(id)"
            in sql
        )

    def test_constraints_keep_order_before_primary_key(self):
        """Test column constraints render in order, PRIMARY KEY last."""
        schema = users_schema(
            columns=[{"name": "id", "type": "serial", "constraints": ["NOT NULL", "UNIQUE"]}]
        )

        sql = build_create_table_sql(schema)

        assert "(id serial NOT NULL UNIQUE PRIMARY KEY)" in sql

    def test_schema_without_primary_key(self):
        schema = users_schema(primaryKey=None)

        assert build_create_table_sql(schema) == (
            "CREATE TABLE IF NOT EXISTS users (id uuid, email text)"
        )

    def test_rendering_does_not_mutate_schema(self):
        """Test rendering twice yields a single PRIMARY KEY."""
        schema = users_schema()

        build_create_table_sql(schema)
        sql = build_create_table_sql(schema)

        assert sql.count("PRIMARY KEY") == 1
        assert schema.columns[0].constraints == []

    def test_snake_case_field_names_accepted(self):
        schema = TableSchema(
            name="orgs",
            columns=[{"name": "id", "type": "uuid"}],
            primary_key="id",
        )

        assert column_definition(schema.columns[0], schema.primary_key) == "id uuid PRIMARY KEY"


class TestDropTableSql:
    def test_drop_table_statement(self):
        assert build_drop_table_sql("users") == "DROP TABLE IF EXISTS users"
