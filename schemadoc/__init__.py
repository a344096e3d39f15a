"""
schemadoc - Database schema reports for PostgreSQL.

Introspects tables, columns, keys and indexes of one or more configured
databases and renders them as Markdown or aligned console text.
"""

__version__ = "0.1.0"

from schemadoc.core.models import Column, ForeignKey, Index, PrimaryKey, TableInfo
from schemadoc.core.reporter import SchemaReporter
from schemadoc.exceptions import DatabaseNotFoundError, InvalidFormatError, SchemaDocError

__all__ = [
    "Column",
    "DatabaseNotFoundError",
    "ForeignKey",
    "Index",
    "InvalidFormatError",
    "PrimaryKey",
    "SchemaDocError",
    "SchemaReporter",
    "TableInfo",
    "__version__",
]
