"""Named database connections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import psycopg
from psycopg.conninfo import conninfo_to_dict

from schemadoc.core.models import TableInfo
from schemadoc.core.schema import SchemaIntrospector

if TYPE_CHECKING:
    from schemadoc.config import Config

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """
    Handle to one configured database.

    The database name is resolved from configuration alone; a live
    connection is only opened by list_tables() and closed before it returns.
    """

    def __init__(
        self,
        name: str,
        url: str,
        schemas: Optional[list[str]] = None,
        database: Optional[str] = None,
    ):
        self.name = name
        self.url = url
        self.schemas = list(schemas or ["public"])
        self._database = database

    @property
    def database(self) -> str:
        """Database name (explicit override, else dbname from the URL)."""
        if self._database:
            return self._database
        dbname = conninfo_to_dict(self.url).get("dbname")
        return dbname or self.name

    def list_tables(self) -> list[TableInfo]:
        """Introspect and return every table, in driver order."""
        logger.info("Introspecting database %s (connection %s)", self.database, self.name)
        with psycopg.connect(self.url) as conn:
            return SchemaIntrospector(conn, self.schemas).get_tables()

    def __repr__(self) -> str:
        return f"DatabaseConnection(name={self.name!r}, database={self.database!r})"


def build_registry(config: Config) -> dict[str, DatabaseConnection]:
    """
    Build the connection registry from configuration.

    Args:
        config: Loaded configuration

    Returns:
        Mapping of connection identifier to connection, in configured order
    """
    return {
        name: DatabaseConnection(
            name=name,
            url=settings.url,
            schemas=settings.schemas,
            database=settings.database,
        )
        for name, settings in config.connections.items()
    }
