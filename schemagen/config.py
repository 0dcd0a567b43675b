"""Configuration management for schemagen."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional

from .database.base import DEFAULT_SOFT_DELETE_COLUMN


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.schemagen/.env
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".schemagen" / ".env"
    if user_env.exists():
        return str(user_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from SCHEMAGEN_* environment variables."""

    driver: str = Field(
        default="mysql",
        description="Database driver: mysql or postgres"
    )
    conn: Optional[str] = Field(
        default=None,
        description="Connection string (DSN) for the schema source"
    )
    tables: Optional[str] = Field(
        default=None,
        description="Comma-separated list of tables to restrict processing to"
    )
    soft_delete_column: str = Field(
        default=DEFAULT_SOFT_DELETE_COLUMN,
        description="Column name that marks a table as soft-deletable"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI"
    )

    class Config:
        env_prefix = "SCHEMAGEN_"
        env_file = _find_env_file()
        env_file_encoding = "utf-8"

    def table_list(self) -> List[str]:
        """Return the configured table selection as a list."""
        return parse_table_list(self.tables)


def parse_table_list(tables: Optional[str]) -> List[str]:
    """Split a comma-separated table selection, dropping blanks and duplicates."""
    if not tables:
        return []
    selected = []
    for name in tables.split(","):
        name = name.strip()
        if name and name not in selected:
            selected.append(name)
    return selected


# Global settings instance
settings = Settings()
