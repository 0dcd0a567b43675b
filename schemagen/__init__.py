"""schemagen - reverse engineer a database schema into a typed model."""

__version__ = "0.1.0"
