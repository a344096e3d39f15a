"""Schema report generation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional, Protocol

import click

from schemadoc.core.models import Column, TableInfo
from schemadoc.core.renderer import RowRenderer, get_renderer
from schemadoc.exceptions import DatabaseNotFoundError

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"


class Connection(Protocol):
    """What the reporter needs from a database connection."""

    @property
    def database(self) -> str: ...

    def list_tables(self) -> list[TableInfo]: ...


def _or_placeholder(value: Any) -> str:
    return str(value) if value else PLACEHOLDER


def column_cells(column: Column) -> list[str]:
    """
    Get the report cells for one column.

    Note the Nullable cell is answered from the NOT NULL flag:
    "No" for NOT NULL columns, "Yes" otherwise.
    """
    return [
        column.name,
        column.type_name,
        _or_placeholder(column.length),
        _or_placeholder(column.precision),
        "No" if column.notnull else "Yes",
        _or_placeholder(column.default),
        "AUTO_INCREMENT" if column.autoincrement else "",
    ]


class SchemaReporter:
    """Render the table structure of one or all configured databases."""

    def __init__(
        self,
        connections: Mapping[str, Connection],
        echo: Callable[[str], Any] = click.echo,
    ):
        """
        Initialize reporter.

        Args:
            connections: Connection identifier to connection, in configured order
            echo: Writes one line of output
        """
        self.connections = connections
        self.echo = echo

    def run(self, format: str = "console", database: Optional[str] = None) -> None:
        """
        Report every configured database, or only the named one.

        Args:
            format: "md" or "console"
            database: Database name to report (default: all databases)

        Raises:
            InvalidFormatError: If format is not recognized (nothing is written)
            DatabaseNotFoundError: If database is given and no connection matches
        """
        renderer = get_renderer(format)

        if database:
            for connection in self.connections.values():
                if connection.database == database:
                    self._report(connection, renderer)
                    return
            raise DatabaseNotFoundError(
                database, [c.database for c in self.connections.values()]
            )

        for connection in self.connections.values():
            self._report(connection, renderer)

    def _report(self, connection: Connection, renderer: RowRenderer) -> None:
        self.echo(f"## Database: {connection.database}")
        self.report_database(connection, renderer)

    def report_database(self, connection: Connection, renderer: RowRenderer) -> None:
        """Write the report of every table of one database."""
        tables = connection.list_tables()
        logger.debug("Reporting %d tables for %s", len(tables), connection.database)

        for table in tables:
            self.echo(f"### Table: {table.name}")
            for line in renderer.header():
                self.echo(line)

            self.report_columns(table, renderer)
            self.report_primary_key(table, renderer)
            self.report_foreign_keys(table, renderer)
            self.report_indexes(table, renderer)

            self.echo("")

    def report_columns(self, table: TableInfo, renderer: RowRenderer) -> None:
        for column in table.columns:
            self.echo(renderer.row(column_cells(column)))

    def report_primary_key(self, table: TableInfo, renderer: RowRenderer) -> None:
        if not table.primary_key:
            return

        self.echo("")
        self.echo("#### Primary Key")
        for column in table.primary_key.columns:
            self.echo(renderer.row([column]))

    def report_foreign_keys(self, table: TableInfo, renderer: RowRenderer) -> None:
        if not table.foreign_keys:
            return

        self.echo("")
        self.echo("#### Foreign Keys")
        for fk in table.foreign_keys:
            for local_column, foreign_column in fk.column_pairs():
                self.echo(renderer.row([local_column, fk.foreign_table, foreign_column]))

    def report_indexes(self, table: TableInfo, renderer: RowRenderer) -> None:
        if not table.indexes:
            return

        self.echo("")
        self.echo("#### Indexes")
        for index in table.indexes:
            self.echo(
                renderer.row(
                    [index.name, ", ".join(index.columns), "Yes" if index.unique else "No"]
                )
            )
