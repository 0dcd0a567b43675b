"""Schema introspection for schemagen.

This module turns a live MySQL or PostgreSQL schema into a dialect
independent model of tables, columns, keys and column tags.
"""

from .models import Column, Table, ForeignKey, OrmTag, Reference, camel_case
from .type_mappers import SemanticType, TypeMapper, MySQLTypeMapper, PostgresTypeMapper
from .base import Blacklist, DialectAdapter
from .mysql import MySQLAdapter
from .postgres import PostgresAdapter
from .builder import SchemaModelBuilder, build_schema_model
from .connections import DIALECTS, get_adapter, open_connection

__all__ = [
    # Data models
    "Column",
    "Table",
    "ForeignKey",
    "OrmTag",
    "Reference",
    "camel_case",
    # Type mappers
    "SemanticType",
    "TypeMapper",
    "MySQLTypeMapper",
    "PostgresTypeMapper",
    # Adapters
    "Blacklist",
    "DialectAdapter",
    "MySQLAdapter",
    "PostgresAdapter",
    "DIALECTS",
    "get_adapter",
    "open_connection",
    # Model building
    "SchemaModelBuilder",
    "build_schema_model",
]
