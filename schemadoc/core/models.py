"""
Core data models for schemadoc.

Read-only structures describing one database table as reported by the
introspector: columns, primary key, foreign keys and indexes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from schemadoc.core.types import column_type_name


@dataclass
class Column:
    """Represents a table column with its properties."""

    name: str
    data_type: str
    length: Optional[int] = None
    precision: Optional[int] = None
    notnull: bool = False
    default: Optional[str] = None
    autoincrement: bool = False

    @property
    def type_name(self) -> str:
        """Short display name of the column type (e.g., integer → IntegerType)."""
        return column_type_name(self.data_type)


@dataclass
class PrimaryKey:
    """Represents a primary key constraint."""

    columns: list[str] = field(default_factory=list)


@dataclass
class ForeignKey:
    """
    Represents a foreign key constraint.

    local_columns and foreign_columns are paired by position:
    local_columns[i] references foreign_columns[i] in foreign_table.
    """

    local_columns: list[str]
    foreign_table: str
    foreign_columns: list[str]
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.local_columns) != len(self.foreign_columns):
            raise ValueError(
                f"Foreign key {self.name or '<unnamed>'} has "
                f"{len(self.local_columns)} local columns but "
                f"{len(self.foreign_columns)} foreign columns"
            )

    def column_pairs(self) -> Iterator[tuple[str, str]]:
        """Yield (local_column, foreign_column) pairs in key order."""
        return zip(self.local_columns, self.foreign_columns)


@dataclass
class Index:
    """Represents an index (including the primary key index)."""

    name: str
    columns: list[str] = field(default_factory=list)
    unique: bool = False
    primary: bool = False


@dataclass
class TableInfo:
    """Complete information about a database table."""

    name: str
    columns: list[Column] = field(default_factory=list)
    primary_key: Optional[PrimaryKey] = None
    foreign_keys: list[ForeignKey] = field(default_factory=list)
    indexes: list[Index] = field(default_factory=list)
