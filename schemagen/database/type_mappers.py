"""Database-specific type mapping strategies."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownTypeError


class SemanticType(str, Enum):
    """Portable, dialect-independent column types."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BOOL = "bool"
    STRING = "string"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    TIMESTAMP = "timestamp"


class TypeMapper:
    """Maps native column type names to semantic types.

    Subclasses provide MAPPING. Keys are matched case-sensitively, exactly as
    the dialect's catalog reports them, without length or precision.
    """

    MAPPING: Mapping[str, SemanticType] = MappingProxyType({})

    def resolve(self, native_type: str) -> SemanticType:
        """Return the semantic type for native_type.

        Raises:
            UnknownTypeError: if the type is not mapped
        """
        try:
            return self.MAPPING[native_type]
        except KeyError:
            raise UnknownTypeError(native_type) from None

    def __contains__(self, native_type: str) -> bool:
        return native_type in self.MAPPING


class MySQLTypeMapper(TypeMapper):
    """Type mapper for MySQL data types."""

    MAPPING = MappingProxyType({
        # int signed
        "int": SemanticType.INT32,
        "integer": SemanticType.INT32,
        "tinyint": SemanticType.INT8,
        "smallint": SemanticType.INT16,
        "mediumint": SemanticType.INT32,
        "bigint": SemanticType.INT64,
        # int unsigned
        "int unsigned": SemanticType.UINT32,
        "integer unsigned": SemanticType.UINT32,
        "tinyint unsigned": SemanticType.UINT8,
        "smallint unsigned": SemanticType.UINT16,
        "mediumint unsigned": SemanticType.UINT32,
        "bigint unsigned": SemanticType.UINT64,
        "bit": SemanticType.UINT64,
        "bool": SemanticType.BOOL,
        "enum": SemanticType.STRING,
        "set": SemanticType.STRING,
        # string & text
        "varchar": SemanticType.STRING,
        "char": SemanticType.STRING,
        "tinytext": SemanticType.STRING,
        "mediumtext": SemanticType.STRING,
        "text": SemanticType.STRING,
        "longtext": SemanticType.STRING,
        # blob
        "blob": SemanticType.STRING,
        "tinyblob": SemanticType.STRING,
        "mediumblob": SemanticType.STRING,
        "longblob": SemanticType.STRING,
        # time
        "date": SemanticType.TIMESTAMP,
        "datetime": SemanticType.TIMESTAMP,
        "timestamp": SemanticType.TIMESTAMP,
        "time": SemanticType.TIMESTAMP,
        # float & decimal
        "float": SemanticType.FLOAT32,
        "double": SemanticType.FLOAT64,
        "decimal": SemanticType.FLOAT64,
        # binary
        "binary": SemanticType.STRING,
        "varbinary": SemanticType.STRING,
        "year": SemanticType.INT16,
    })


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL data types.

    money is left out on purpose: it has no lossless portable type.
    """

    MAPPING = MappingProxyType({
        "serial": SemanticType.INT32,
        "bigserial": SemanticType.INT64,
        "smallint": SemanticType.INT16,
        "integer": SemanticType.INT32,
        "bigint": SemanticType.INT64,
        "boolean": SemanticType.BOOL,
        "char": SemanticType.STRING,
        "character": SemanticType.STRING,
        "character varying": SemanticType.STRING,
        "varchar": SemanticType.STRING,
        "text": SemanticType.STRING,
        "date": SemanticType.TIMESTAMP,
        "time": SemanticType.TIMESTAMP,
        "time without time zone": SemanticType.TIMESTAMP,
        "time with time zone": SemanticType.TIMESTAMP,
        "timestamp": SemanticType.TIMESTAMP,
        "timestamp without time zone": SemanticType.TIMESTAMP,
        "timestamp with time zone": SemanticType.TIMESTAMP,
        # time interval, string for now
        "interval": SemanticType.STRING,
        "real": SemanticType.FLOAT32,
        "double precision": SemanticType.FLOAT64,
        "decimal": SemanticType.FLOAT64,
        "numeric": SemanticType.FLOAT64,
        "bytea": SemanticType.STRING,
        "tsvector": SemanticType.STRING,
        "ARRAY": SemanticType.STRING,
        "USER-DEFINED": SemanticType.STRING,
        "uuid": SemanticType.STRING,
        "json": SemanticType.STRING,
        "jsonb": SemanticType.STRING,
        "inet": SemanticType.STRING,
    })
