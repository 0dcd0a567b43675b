"""Error types for schemagen."""

from typing import Optional, Dict, Any


class SchemaGenError(Exception):
    """Base exception for schema model building errors."""

    def __init__(self, message: str, code: str = "SCHEMAGEN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for reporting."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConnectionError(SchemaGenError):
    """Cannot reach or authenticate to the schema source."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class MetadataQueryError(SchemaGenError):
    """A catalog query failed or returned unreadable rows."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="METADATA_QUERY_ERROR", details=details)


class UnknownTypeError(SchemaGenError):
    """A native column type has no entry in the dialect's type mapping."""

    def __init__(self, native_type: str, table: Optional[str] = None, column: Optional[str] = None):
        location = ""
        if table and column:
            location = f" (column {table}.{column})"
        elif column:
            location = f" (column {column})"
        super().__init__(
            f"data type '{native_type}' not found{location}",
            code="UNKNOWN_TYPE",
            details={"native_type": native_type, "table": table, "column": column},
        )
        self.native_type = native_type
        self.table = table
        self.column = column


class ExtractionError(SchemaGenError):
    """A raw catalog type string did not match the expected structural pattern."""

    def __init__(self, column: str, raw_type: str, expected: Optional[str] = None):
        message = f"Could not parse type '{raw_type}' of column '{column}'"
        if expected:
            message += f": expected {expected}"
        super().__init__(
            message,
            code="EXTRACTION_ERROR",
            details={"column": column, "raw_type": raw_type, "expected": expected},
        )
        self.column = column
        self.raw_type = raw_type


class UnsupportedDialectError(SchemaGenError):
    """The requested database driver has no dialect adapter."""

    def __init__(self, driver: str, message: Optional[str] = None):
        super().__init__(
            message or f"Unknown database driver '{driver}'. Must be either \"mysql\" or \"postgres\"",
            code="UNSUPPORTED_DIALECT",
            details={"driver": driver},
        )
        self.driver = driver


class PassOrderError(SchemaGenError):
    """Column resolution was attempted before constraint resolution completed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="PASS_ORDER_ERROR", details=details)
