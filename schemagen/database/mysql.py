"""MySQL dialect adapter."""

from typing import List

from .base import ColumnRow, ConstraintRow, DialectAdapter
from .type_mappers import MySQLTypeMapper


class MySQLAdapter(DialectAdapter):
    """Reads MySQL's information_schema for the current database()."""

    name = "mysql"
    type_mapper = MySQLTypeMapper()

    STRING_TYPES = frozenset({"char", "varchar"})
    TEMPORAL_TYPES = frozenset({"date", "datetime", "timestamp", "time"})
    DECIMAL_TYPES = frozenset({"decimal"})
    BINARY_TYPES = frozenset({"binary", "varbinary"})
    BIT_TYPES = frozenset({"bit"})
    SIGNED_INT_TYPES = frozenset({"int", "tinyint", "smallint", "mediumint", "bigint"})

    def list_tables(self) -> List[str]:
        result = self._execute_query("""
            SELECT table_name
            FROM information_schema.tables
            WHERE table_schema = database()
              AND table_type = 'BASE TABLE'
            ORDER BY table_name
        """)
        return [self._unpack(row, 1, "table names")[0] for row in result]

    def fetch_constraint_rows(self, table_name: str) -> List[ConstraintRow]:
        result = self._execute_query("""
            SELECT
                c.constraint_type,
                u.column_name,
                u.referenced_table_schema,
                u.referenced_table_name,
                u.referenced_column_name,
                u.ordinal_position
            FROM information_schema.table_constraints c
            INNER JOIN information_schema.key_column_usage u
              ON c.constraint_name = u.constraint_name
              AND c.table_schema = u.table_schema
              AND c.table_name = u.table_name
            WHERE c.table_schema = database()
              AND c.table_name = %s
            ORDER BY c.constraint_name, u.ordinal_position
        """, (table_name,))
        return [self._constraint_row(row) for row in result]

    def fetch_column_rows(self, table_name: str) -> List[ColumnRow]:
        result = self._execute_query("""
            SELECT
                column_name,
                data_type,
                column_type,
                is_nullable,
                column_default,
                extra,
                column_comment
            FROM information_schema.columns
            WHERE table_schema = database()
              AND table_name = %s
            ORDER BY ordinal_position
        """, (table_name,))
        return [self._column_row(row) for row in result]
