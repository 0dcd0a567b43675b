"""Column derivation: turns one catalog column row into a Column and its tag."""

import logging
from typing import TYPE_CHECKING

from ..errors import UnknownTypeError
from .models import (
    Column,
    IDENTITY_FIELD,
    OrmTag,
    RENAMED_IDENTITY_FIELD,
    Reference,
    Table,
    camel_case,
)
from .type_mappers import SemanticType
from .type_parsing import extract_decimal, extract_int_unsigned, extract_size

if TYPE_CHECKING:
    from .base import Blacklist, ColumnRow, DialectAdapter

logger = logging.getLogger(__name__)

AUTO_INCREMENT = "auto_increment"
CREATE_TIMESTAMP_DEFAULTS = frozenset({"CURRENT_TIMESTAMP", "current_timestamp()", "now()"})
UPDATE_TIMESTAMP_MARKER = "on update current_timestamp"


def _map_type(adapter: "DialectAdapter", native_type: str, table: Table, column: str) -> SemanticType:
    try:
        return adapter.map_type(native_type)
    except UnknownTypeError as e:
        raise UnknownTypeError(e.native_type, table=table.name, column=column) from e


def _timestamp_automation(tag: OrmTag, row: "ColumnRow"):
    if row.column_default not in CREATE_TIMESTAMP_DEFAULTS:
        return
    if UPDATE_TIMESTAMP_MARKER in row.extra.lower():
        tag.auto_now = True
    else:
        tag.auto_now_add = True


def _derive_scalar_tag(adapter: "DialectAdapter", table: Table, row: "ColumnRow", tag: OrmTag):
    data_type = row.data_type
    tag.null = row.is_nullable == "YES"

    if data_type in adapter.STRING_TYPES and adapter.declares_bound(row):
        tag.size = extract_size(row.column_name, row.column_type)

    if data_type in adapter.TEMPORAL_TYPES:
        tag.type = data_type
        _timestamp_automation(tag, row)
        table.import_time_pkg = True

    if data_type in adapter.DECIMAL_TYPES and adapter.declares_bound(row):
        tag.digits, tag.decimals = extract_decimal(row.column_name, row.column_type)

    if data_type in adapter.BINARY_TYPES or data_type in adapter.BIT_TYPES:
        tag.size = extract_size(row.column_name, row.column_type)

    if data_type in adapter.OPAQUE_TYPES:
        tag.type = data_type


def derive_column(adapter: "DialectAdapter", table: Table, row: "ColumnRow", blacklist: "Blacklist") -> Column:
    """Derive the Column for one catalog row of table.

    The table's primary key and foreign keys must already be resolved, and
    blacklist must hold the final state for every table in the run.

    Raises:
        UnknownTypeError: if the native type is not mapped
        ExtractionError: if size or precision cannot be parsed
    """
    col_name = row.column_name
    col_type = _map_type(adapter, row.data_type, table, col_name)

    if row.data_type in adapter.SIGNED_INT_TYPES and extract_int_unsigned(col_name, row.column_type):
        col_type = _map_type(adapter, f"{row.data_type} unsigned", table, col_name)

    if col_name == adapter.soft_delete_column:
        table.has_soft_delete = True

    tag = OrmTag(column=col_name)
    column = Column(name=camel_case(col_name), type=col_type, tag=tag)

    fk = table.fk.get(col_name)
    if table.pk and table.pk == col_name:
        column.name = IDENTITY_FIELD
        table.pk_type = col_type
        if row.extra == AUTO_INCREMENT:
            tag.auto = True
        else:
            tag.pk = True
    elif fk is not None and fk.ref_table not in blacklist:
        tag.rel_fk = True
        tag.table_fk = fk.ref_table
        ref_name = camel_case(fk.ref_table)
        if all(existing.name != ref_name for existing in table.columns):
            column.name = ref_name
        column.type = Reference(camel_case(fk.ref_table))
    else:
        if fk is not None:
            table.degraded_foreign_keys.append(fk)
            logger.warning(
                "Foreign key %s.%s references blacklisted table '%s'; treating it as a plain column",
                table.name, col_name, fk.ref_table,
            )
        if column.name == IDENTITY_FIELD:
            column.name = RENAMED_IDENTITY_FIELD
        _derive_scalar_tag(adapter, table, row, tag)

    tag.comment = row.column_comment
    return column
