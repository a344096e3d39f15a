"""Core functionality for schemadoc."""

from schemadoc.core.connection import DatabaseConnection, build_registry
from schemadoc.core.models import Column, ForeignKey, Index, PrimaryKey, TableInfo
from schemadoc.core.renderer import ConsoleRowRenderer, MarkdownRowRenderer, get_renderer
from schemadoc.core.reporter import SchemaReporter
from schemadoc.core.schema import SchemaIntrospector

__all__ = [
    "Column",
    "ConsoleRowRenderer",
    "DatabaseConnection",
    "ForeignKey",
    "Index",
    "MarkdownRowRenderer",
    "PrimaryKey",
    "SchemaIntrospector",
    "SchemaReporter",
    "TableInfo",
    "build_registry",
    "get_renderer",
]
