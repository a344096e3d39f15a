"""PostgreSQL schema introspection."""

import logging
import re

from psycopg import Connection

from schemadoc.core.models import Column, ForeignKey, Index, PrimaryKey, TableInfo

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "public"

# Precision is only meaningful for exact numerics declared as NUMERIC(p, s)
PRECISION_TYPES = {"numeric", "decimal"}

SEQUENCE_DEFAULT = re.compile(r"^nextval\(", re.IGNORECASE)


def qualified_name(schema: str, table: str) -> str:
    """Table name as shown in reports (bare for the default schema)."""
    if schema == DEFAULT_SCHEMA:
        return table
    return f"{schema}.{table}"


class SchemaIntrospector:
    """Introspect PostgreSQL tables, columns, keys and indexes."""

    def __init__(self, conn: Connection, schemas: list[str] | None = None):
        self.conn = conn
        self.schemas = list(schemas or [DEFAULT_SCHEMA])

    def get_tables(self) -> list[TableInfo]:
        """Get all base tables in the configured schemas."""
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT table_schema, table_name
                FROM information_schema.tables
                WHERE table_schema = ANY(%s)
                  AND table_type = 'BASE TABLE'
                ORDER BY table_schema, table_name
                """,
                (self.schemas,),
            )
            rows = cur.fetchall()

        logger.debug("Found %d tables in schemas %s", len(rows), ", ".join(self.schemas))
        return [self.get_table_info(schema, table) for schema, table in rows]

    def get_table_info(self, schema: str, table_name: str) -> TableInfo:
        """Get complete table information."""
        indexes = self.get_indexes(schema, table_name)
        return TableInfo(
            name=qualified_name(schema, table_name),
            columns=self.get_columns(schema, table_name),
            primary_key=self.get_primary_key(schema, table_name, indexes),
            foreign_keys=self.get_foreign_keys(schema, table_name),
            indexes=indexes,
        )

    def get_columns(self, schema: str, table_name: str) -> list[Column]:
        """Get all columns for a table in ordinal order."""
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT
                    column_name,
                    data_type,
                    character_maximum_length,
                    numeric_precision,
                    is_nullable,
                    column_default,
                    is_identity
                FROM information_schema.columns
                WHERE table_schema = %s
                  AND table_name = %s
                ORDER BY ordinal_position
                """,
                (schema, table_name),
            )
            rows = cur.fetchall()

        columns = []
        for name, data_type, length, precision, is_nullable, default, is_identity in rows:
            autoincrement = is_identity == "YES" or bool(
                default and SEQUENCE_DEFAULT.match(default)
            )
            columns.append(
                Column(
                    name=name,
                    data_type=data_type,
                    length=length,
                    precision=precision if data_type in PRECISION_TYPES else None,
                    notnull=is_nullable == "NO",
                    # Sequence-backed defaults are reported as AUTO_INCREMENT instead
                    default=None if autoincrement else default,
                    autoincrement=autoincrement,
                )
            )
        return columns

    def get_primary_key(
        self, schema: str, table_name: str, indexes: list[Index] | None = None
    ) -> PrimaryKey | None:
        """Get the primary key of a table, or None if it has none."""
        if indexes is None:
            indexes = self.get_indexes(schema, table_name)

        for index in indexes:
            if index.primary:
                return PrimaryKey(columns=list(index.columns))
        return None

    def get_foreign_keys(self, schema: str, table_name: str) -> list[ForeignKey]:
        """Get all foreign keys for a table, local and foreign columns paired."""
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT
                    con.conname,
                    fn.nspname AS foreign_schema,
                    ft.relname AS foreign_table,
                    array_agg(la.attname::text ORDER BY k.ord) AS local_columns,
                    array_agg(fa.attname::text ORDER BY k.ord) AS foreign_columns
                FROM pg_constraint con
                JOIN pg_class t ON t.oid = con.conrelid
                JOIN pg_namespace n ON n.oid = t.relnamespace
                JOIN pg_class ft ON ft.oid = con.confrelid
                JOIN pg_namespace fn ON fn.oid = ft.relnamespace
                CROSS JOIN LATERAL unnest(con.conkey, con.confkey)
                    WITH ORDINALITY AS k(local_attnum, foreign_attnum, ord)
                JOIN pg_attribute la
                  ON la.attrelid = con.conrelid AND la.attnum = k.local_attnum
                JOIN pg_attribute fa
                  ON fa.attrelid = con.confrelid AND fa.attnum = k.foreign_attnum
                WHERE con.contype = 'f'
                  AND n.nspname = %s
                  AND t.relname = %s
                GROUP BY con.conname, fn.nspname, ft.relname
                ORDER BY con.conname
                """,
                (schema, table_name),
            )
            rows = cur.fetchall()

        return [
            ForeignKey(
                name=row[0],
                foreign_table=qualified_name(row[1], row[2]),
                local_columns=list(row[3]),
                foreign_columns=list(row[4]),
            )
            for row in rows
        ]

    def get_indexes(self, schema: str, table_name: str) -> list[Index]:
        """
        Get all indexes for a table, including the primary key index.

        Only key columns are listed (INCLUDE columns are not). Expression
        keys are listed by their expression text.
        """
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT
                    ic.relname AS index_name,
                    i.indisunique,
                    i.indisprimary,
                    array_agg(
                        COALESCE(
                            a.attname::text,
                            pg_get_indexdef(i.indexrelid, k.ord::int, true)
                        )
                        ORDER BY k.ord
                    ) AS columns
                FROM pg_index i
                JOIN pg_class t ON t.oid = i.indrelid
                JOIN pg_namespace n ON n.oid = t.relnamespace
                JOIN pg_class ic ON ic.oid = i.indexrelid
                CROSS JOIN LATERAL unnest(i.indkey) WITH ORDINALITY AS k(attnum, ord)
                LEFT JOIN pg_attribute a
                  ON a.attrelid = t.oid AND a.attnum = k.attnum AND k.attnum <> 0
                WHERE n.nspname = %s
                  AND t.relname = %s
                  AND k.ord <= i.indnkeyatts
                GROUP BY ic.relname, i.indisunique, i.indisprimary
                ORDER BY i.indisprimary DESC, ic.relname
                """,
                (schema, table_name),
            )
            rows = cur.fetchall()

        return [
            Index(name=row[0], unique=row[1], primary=row[2], columns=list(row[3]))
            for row in rows
        ]
