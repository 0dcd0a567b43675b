"""Two-pass construction of the schema model."""

import logging
from typing import Iterable, List, Optional

from .base import Blacklist, DialectAdapter
from .models import Table

logger = logging.getLogger(__name__)


class SchemaModelBuilder:
    """Builds Table models for a run using one dialect adapter.

    Pass 1 resolves constraints for every table, which also fills the
    blacklist of tables without a usable single-column primary key. Pass 2
    resolves columns against the completed blacklist. Any error aborts the
    build; no partial model is returned.

    Example usage:
        with open_connection("mysql", dsn) as conn:
            tables = SchemaModelBuilder(get_adapter("mysql", conn)).build()
    """

    def __init__(self, adapter: DialectAdapter):
        self.adapter = adapter
        self.blacklist = Blacklist()

    def _table_names(self, table_names: Optional[Iterable[str]]) -> List[str]:
        if table_names is None:
            return self.adapter.list_tables()
        selected: List[str] = []
        for name in table_names:
            if name not in selected:
                selected.append(name)
        return selected

    def build(self, table_names: Optional[Iterable[str]] = None) -> List[Table]:
        """Introspect the schema and return its tables in processing order.

        Args:
            table_names: Optional explicit selection; all tables when None

        Returns:
            List of fully populated Table objects
        """
        logger.info("Analyzing database tables...")
        self.blacklist = Blacklist()
        names = self._table_names(table_names)

        tables = [Table(name=name) for name in names]
        logger.debug("Resolving constraints for %d tables", len(tables))
        for table in tables:
            self.adapter.resolve_constraints(table, self.blacklist)
        self.blacklist.seal()

        if len(self.blacklist):
            logger.debug("Blacklisted tables: %s", ", ".join(self.blacklist))

        logger.debug("Resolving columns for %d tables", len(tables))
        for table in tables:
            self.adapter.resolve_columns(table, self.blacklist)

        return tables


def build_schema_model(adapter: DialectAdapter, table_names: Optional[Iterable[str]] = None) -> List[Table]:
    """Convenience wrapper around SchemaModelBuilder.build()."""
    return SchemaModelBuilder(adapter).build(table_names)
