"""PostgreSQL dialect adapter."""

from typing import List

from .base import ColumnRow, ConstraintRow, DialectAdapter
from .type_mappers import PostgresTypeMapper


class PostgresAdapter(DialectAdapter):
    """Reads PostgreSQL's information_schema for the current database.

    key_column_usage has no referenced columns here, so constraints are
    also joined to constraint_column_usage. The catalog has no combined
    column type string either; one is built from the length and precision
    columns, and identity or serial columns are reported as auto_increment.
    """

    name = "postgres"
    type_mapper = PostgresTypeMapper()

    EXCLUDED_SCHEMAS = ("pg_catalog", "information_schema")

    STRING_TYPES = frozenset({"character", "character varying"})
    TEMPORAL_TYPES = frozenset({
        "date",
        "time",
        "time without time zone",
        "time with time zone",
        "timestamp",
        "timestamp without time zone",
        "timestamp with time zone",
    })
    DECIMAL_TYPES = frozenset({"numeric", "decimal"})
    OPAQUE_TYPES = frozenset({"interval", "uuid", "json", "jsonb"})

    def list_tables(self) -> List[str]:
        result = self._execute_query("""
            SELECT table_name
            FROM information_schema.tables
            WHERE table_catalog = current_database()
              AND table_type = 'BASE TABLE'
              AND table_schema NOT IN %s
            ORDER BY table_name
        """, (self.EXCLUDED_SCHEMAS,))
        return [self._unpack(row, 1, "table names")[0] for row in result]

    def fetch_constraint_rows(self, table_name: str) -> List[ConstraintRow]:
        result = self._execute_query("""
            SELECT
                c.constraint_type,
                u.column_name,
                cu.table_schema AS referenced_table_schema,
                cu.table_name AS referenced_table_name,
                cu.column_name AS referenced_column_name,
                u.ordinal_position
            FROM information_schema.table_constraints c
            INNER JOIN information_schema.key_column_usage u
              ON c.constraint_name = u.constraint_name
              AND c.constraint_schema = u.constraint_schema
            INNER JOIN information_schema.constraint_column_usage cu
              ON cu.constraint_name = c.constraint_name
              AND cu.constraint_schema = c.constraint_schema
            WHERE c.table_name = %s
              AND c.table_catalog = current_database()
              AND c.table_schema NOT IN %s
              AND u.table_name = c.table_name
            ORDER BY c.constraint_name, u.ordinal_position
        """, (table_name, self.EXCLUDED_SCHEMAS))
        return [self._constraint_row(row) for row in result]

    def fetch_column_rows(self, table_name: str) -> List[ColumnRow]:
        result = self._execute_query("""
            SELECT
                column_name,
                data_type,
                data_type ||
                CASE
                    WHEN data_type IN ('character', 'character varying')
                      AND character_maximum_length IS NOT NULL
                        THEN '(' || character_maximum_length || ')'
                    WHEN data_type = 'numeric' AND numeric_precision IS NOT NULL
                        THEN '(' || numeric_precision || ',' || COALESCE(numeric_scale, 0) || ')'
                    ELSE ''
                END AS column_type,
                is_nullable,
                column_default,
                CASE
                    WHEN is_identity = 'YES' OR column_default LIKE 'nextval(%%'
                        THEN 'auto_increment'
                    ELSE ''
                END AS extra,
                '' AS column_comment
            FROM information_schema.columns
            WHERE table_name = %s
              AND table_catalog = current_database()
              AND table_schema NOT IN %s
            ORDER BY ordinal_position
        """, (table_name, self.EXCLUDED_SCHEMAS))
        return [self._column_row(row) for row in result]

    def declares_bound(self, row: ColumnRow) -> bool:
        # unbounded character varying and numeric carry no "(...)"
        return "(" in row.column_type
