"""Pytest configuration and shared fixtures."""

import os

import psycopg
import pytest
from psycopg import Connection

from schemadoc.core.models import Column, ForeignKey, Index, PrimaryKey, TableInfo

TEST_DATABASE_URL = os.environ.get(
    "SCHEMADOC_TEST_DATABASE_URL", "postgresql://localhost/schemadoc_test"
)


class FakeConnection:
    """In-memory connection returning a fixed table list."""

    def __init__(self, database: str, tables: list[TableInfo] | None = None):
        self.database = database
        self.tables = list(tables or [])
        self.list_calls = 0

    def list_tables(self) -> list[TableInfo]:
        self.list_calls += 1
        return self.tables


@pytest.fixture
def users_table() -> TableInfo:
    """Table with a primary key, a unique index and no foreign keys."""
    return TableInfo(
        name="users",
        columns=[
            Column(name="id", data_type="integer", notnull=True, autoincrement=True),
            Column(name="email", data_type="character varying", length=255, notnull=True),
            Column(name="created_at", data_type="timestamp with time zone", default="now()"),
        ],
        primary_key=PrimaryKey(columns=["id"]),
        indexes=[
            Index(name="users_pkey", columns=["id"], unique=True, primary=True),
            Index(name="users_email_key", columns=["email"], unique=True),
        ],
    )


@pytest.fixture
def orders_table() -> TableInfo:
    """Table with a two-column foreign key."""
    return TableInfo(
        name="orders",
        columns=[
            Column(name="id", data_type="bigint", notnull=True, autoincrement=True),
            Column(name="user_id", data_type="integer", notnull=True),
            Column(name="tenant_id", data_type="integer", notnull=True),
            Column(name="total", data_type="numeric", precision=12, default="0.00"),
        ],
        primary_key=PrimaryKey(columns=["id"]),
        foreign_keys=[
            ForeignKey(
                name="orders_user_fk",
                local_columns=["user_id", "tenant_id"],
                foreign_table="users",
                foreign_columns=["id", "tenant"],
            )
        ],
        indexes=[
            Index(name="orders_user_idx", columns=["user_id", "tenant_id"], unique=False),
        ],
    )


@pytest.fixture
def bare_table() -> TableInfo:
    """Table without keys or indexes."""
    return TableInfo(
        name="audit_log",
        columns=[Column(name="message", data_type="text")],
    )


@pytest.fixture
def make_connection():
    """Factory for in-memory connections."""
    return FakeConnection


@pytest.fixture
def lines() -> list[str]:
    """Collects reporter output, one entry per line."""
    return []


@pytest.fixture
def test_database_url() -> str:
    return TEST_DATABASE_URL


@pytest.fixture
def db_conn() -> Connection:
    """
    Provide a test database connection.

    Skips the test when the test database is not reachable.
    """
    try:
        conn = psycopg.connect(TEST_DATABASE_URL, autocommit=False)
    except psycopg.OperationalError as e:
        pytest.skip(f"Test database not available: {e}")

    yield conn

    # Rollback any changes
    conn.rollback()
    conn.close()


@pytest.fixture
def test_schema(db_conn: Connection) -> str:
    """
    Create a test schema with sample tables.

    Returns the schema name.
    """
    schema_name = "test_schemadoc"

    with db_conn.cursor() as cur:
        cur.execute(f"DROP SCHEMA IF EXISTS {schema_name} CASCADE")
        cur.execute(f"CREATE SCHEMA {schema_name}")

        cur.execute(f"""
            CREATE TABLE {schema_name}.tenant (
                id INTEGER NOT NULL,
                region VARCHAR(8) NOT NULL,
                name VARCHAR(100),
                PRIMARY KEY (id, region)
            )
        """)

        cur.execute(f"""
            CREATE TABLE {schema_name}.account (
                id SERIAL PRIMARY KEY,
                tenant_id INTEGER NOT NULL,
                tenant_region VARCHAR(8) NOT NULL,
                balance NUMERIC(12, 2) DEFAULT 0,
                status TEXT NOT NULL DEFAULT 'active',
                pk_seq INTEGER GENERATED ALWAYS AS IDENTITY,
                CONSTRAINT account_tenant_fk FOREIGN KEY (tenant_id, tenant_region)
                    REFERENCES {schema_name}.tenant (id, region)
            )
        """)
        cur.execute(
            f"CREATE UNIQUE INDEX account_status_idx ON {schema_name}.account (status, tenant_id)"
        )

        cur.execute(f"CREATE INDEX tenant_lower_name_idx ON {schema_name}.tenant (lower(name))")
        cur.execute(
            f"CREATE INDEX tenant_region_idx ON {schema_name}.tenant (region) INCLUDE (name)"
        )

        cur.execute(f"CREATE TABLE {schema_name}.notes (body TEXT)")

        db_conn.commit()

    yield schema_name

    # Cleanup
    db_conn.rollback()
    with db_conn.cursor() as cur:
        cur.execute(f"DROP SCHEMA IF EXISTS {schema_name} CASCADE")
        db_conn.commit()
