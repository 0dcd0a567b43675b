"""Dialect adapter contract shared by the MySQL and PostgreSQL strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterator, List, Sequence, Set

from ..errors import MetadataQueryError, PassOrderError
from .derivation import derive_column
from .models import ForeignKey, Table
from .type_mappers import SemanticType, TypeMapper


DEFAULT_SOFT_DELETE_COLUMN = "is_deleted"


class Blacklist:
    """Tables that cannot be used as foreign key targets.

    Membership is write-once: tables are only ever added. Once sealed, the
    set is final and column resolution may consult it.
    """

    def __init__(self):
        self._tables: Set[str] = set()
        self._sealed = False

    def add(self, table_name: str):
        if self._sealed:
            raise PassOrderError(
                f"Cannot blacklist '{table_name}': constraint resolution already completed",
                details={"table": table_name},
            )
        self._tables.add(table_name)

    def seal(self):
        """Mark constraint resolution as complete for every table."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, table_name: object) -> bool:
        return table_name in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._tables))

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"Blacklist({sorted(self._tables)!r}, sealed={self._sealed})"


@dataclass
class ConstraintRow:
    """One row of table_constraints joined to key column usage."""
    constraint_type: str
    column_name: str
    ref_schema: str
    ref_table: str
    ref_column: str
    ordinal_position: int


@dataclass
class ColumnRow:
    """One row of information_schema.columns, normalized across dialects."""
    column_name: str
    data_type: str
    column_type: str
    is_nullable: str
    column_default: str
    extra: str
    column_comment: str = ""


def _text(value: Any) -> str:
    """Normalize a catalog value: NULL becomes '', bytes are decoded."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def apply_constraint_row(table: Table, row: ConstraintRow, blacklist: Blacklist):
    """Fold one constraint row into the table's key fields.

    A composite primary key blacklists the table for good, whatever order
    its rows arrive in.
    """
    if row.constraint_type == "PRIMARY KEY":
        if row.ordinal_position == 1:
            if table.name not in blacklist:
                table.pk = row.column_name
        else:
            table.pk = ""
            blacklist.add(table.name)
    elif row.constraint_type == "UNIQUE":
        table.uk.append(row.column_name)
    elif row.constraint_type == "FOREIGN KEY":
        table.fk[row.column_name] = ForeignKey(
            name=row.column_name,
            ref_schema=row.ref_schema,
            ref_table=row.ref_table,
            ref_column=row.ref_column,
        )


class DialectAdapter(ABC):
    """Catalog queries and type rules for one SQL dialect.

    Subclasses implement the queries and declare which native types get
    which tag treatment. The connection is any open DB-API connection;
    its lifecycle belongs to the caller.
    """

    name: str = ""
    type_mapper: TypeMapper = TypeMapper()

    # Native types whose raw type string carries a length: varchar(255)
    STRING_TYPES: FrozenSet[str] = frozenset()
    TEMPORAL_TYPES: FrozenSet[str] = frozenset()
    DECIMAL_TYPES: FrozenSet[str] = frozenset()
    BINARY_TYPES: FrozenSet[str] = frozenset()
    BIT_TYPES: FrozenSet[str] = frozenset()
    # Signed integer types that may carry an "unsigned" modifier
    SIGNED_INT_TYPES: FrozenSet[str] = frozenset()
    # Free-form types whose native name is kept verbatim as a type override
    OPAQUE_TYPES: FrozenSet[str] = frozenset()

    def __init__(self, connection, soft_delete_column: str = DEFAULT_SOFT_DELETE_COLUMN):
        self.connection = connection
        self.soft_delete_column = soft_delete_column

    def _execute_query(self, sql: str, params: Sequence[Any] = ()) -> List[tuple]:
        """Run a catalog query and return its rows.

        Raises:
            MetadataQueryError: if the driver fails
        """
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql, tuple(params))
            return list(cursor.fetchall())
        except Exception as e:
            raise MetadataQueryError(
                f"Could not query INFORMATION_SCHEMA: {e}",
                details={"dialect": self.name, "params": list(params)},
            ) from e
        finally:
            cursor.close()

    @staticmethod
    def _unpack(row: Sequence[Any], width: int, what: str) -> List[str]:
        if len(row) != width:
            raise MetadataQueryError(
                f"Could not read INFORMATION_SCHEMA for {what}: expected {width} values, got {len(row)}",
                details={"row": [repr(value) for value in row]},
            )
        try:
            return [_text(value) for value in row]
        except UnicodeDecodeError as e:
            raise MetadataQueryError(
                f"Could not read INFORMATION_SCHEMA for {what}: {e}",
                details={"row": [repr(value) for value in row]},
            ) from e

    def _constraint_row(self, row: Sequence[Any]) -> ConstraintRow:
        constraint_type, column_name, ref_schema, ref_table, ref_column, position = \
            self._unpack(row, 6, "PK/UK/FK information")
        try:
            ordinal_position = int(position)
        except ValueError:
            raise MetadataQueryError(
                f"Could not read INFORMATION_SCHEMA for PK/UK/FK information: "
                f"bad ordinal position {position!r} for column '{column_name}'",
                details={"column": column_name, "ordinal_position": position},
            ) from None
        return ConstraintRow(constraint_type, column_name, ref_schema, ref_table, ref_column, ordinal_position)

    def _column_row(self, row: Sequence[Any]) -> ColumnRow:
        return ColumnRow(*self._unpack(row, 7, "column information"))

    @abstractmethod
    def list_tables(self) -> List[str]:
        """Return the names of all user tables in the current database."""
        pass

    @abstractmethod
    def fetch_constraint_rows(self, table_name: str) -> List[ConstraintRow]:
        """Return PK/UK/FK rows for a table."""
        pass

    @abstractmethod
    def fetch_column_rows(self, table_name: str) -> List[ColumnRow]:
        """Return column rows for a table in native column order."""
        pass

    def declares_bound(self, row: ColumnRow) -> bool:
        """Whether the raw type string of a sized type carries its bound."""
        return True

    def map_type(self, native_type: str) -> SemanticType:
        return self.type_mapper.resolve(native_type)

    def resolve_constraints(self, table: Table, blacklist: Blacklist):
        """Fill in the table's primary, unique and foreign keys.

        A table left without a single-column primary key is blacklisted.
        """
        for row in self.fetch_constraint_rows(table.name):
            apply_constraint_row(table, row, blacklist)
        if not table.pk:
            blacklist.add(table.name)

    def resolve_columns(self, table: Table, blacklist: Blacklist):
        """Derive the table's columns.

        Raises:
            PassOrderError: if constraint resolution is not complete
        """
        if not blacklist.sealed:
            raise PassOrderError(
                f"Cannot resolve columns of '{table.name}' before constraints of every table are resolved",
                details={"table": table.name},
            )
        for row in self.fetch_column_rows(table.name):
            table.columns.append(derive_column(self, table, row, blacklist))
