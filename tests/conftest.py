"""Shared pytest fixtures for schemagen tests."""

import pytest

from schemagen.database import Blacklist, MySQLAdapter, PostgresAdapter, Table

from .fixtures import FakeConnection, mysql_column, postgres_column


@pytest.fixture
def sealed_blacklist():
    """An empty blacklist whose constraint pass has completed."""
    blacklist = Blacklist()
    blacklist.seal()
    return blacklist


@pytest.fixture
def mysql_adapter():
    """MySQL adapter over a connection with no catalog rows."""
    return MySQLAdapter(FakeConnection())


@pytest.fixture
def postgres_adapter():
    """PostgreSQL adapter over a connection with no catalog rows."""
    return PostgresAdapter(FakeConnection())


@pytest.fixture
def users_table():
    """A users table whose primary key is already resolved."""
    return Table(name="users", pk="id")


@pytest.fixture
def shop_mysql_connection():
    """A MySQL shop schema.

    orders references users and the composite-key order_items table, and is
    listed before order_items so the reference is a forward one.
    """
    return FakeConnection(
        tables=["orders", "order_items", "users"],
        constraints={
            "users": [
                ("PRIMARY KEY", "id", None, None, None, 1),
                ("UNIQUE", "email", None, None, None, 1),
            ],
            "order_items": [
                ("PRIMARY KEY", "order_id", None, None, None, 1),
                ("PRIMARY KEY", "item_id", None, None, None, 2),
                ("FOREIGN KEY", "order_id", "shop", "orders", "id", 1),
            ],
            "orders": [
                ("PRIMARY KEY", "id", None, None, None, 1),
                ("FOREIGN KEY", "user_id", "shop", "users", "id", 1),
                ("FOREIGN KEY", "order_item_id", "shop", "order_items", "order_id", 1),
            ],
        },
        columns={
            "users": [
                mysql_column("id", "int", "int(11)", nullable=False, extra="auto_increment"),
                mysql_column("name", "varchar", "varchar(50)", nullable=False),
                mysql_column("created_at", "timestamp", default="CURRENT_TIMESTAMP"),
                mysql_column("email", "varchar", "varchar(255)", comment="login address"),
            ],
            "order_items": [
                mysql_column("order_id", "int", "int(11)", nullable=False),
                mysql_column("item_id", "int", "int(11)", nullable=False),
                mysql_column("price", "decimal", "decimal(10,2)", nullable=False),
            ],
            "orders": [
                mysql_column("id", "bigint", "bigint(20) unsigned", nullable=False, extra="auto_increment"),
                mysql_column("user_id", "int", "int(11)"),
                mysql_column("order_item_id", "int", "int(11)"),
                mysql_column("quantity", "int", "int(10) unsigned", nullable=False),
                mysql_column(
                    "updated_at",
                    "timestamp",
                    default="CURRENT_TIMESTAMP",
                    extra="on update CURRENT_TIMESTAMP",
                ),
                mysql_column("is_deleted", "tinyint", "tinyint(1)", nullable=False, default="0"),
            ],
        },
    )


@pytest.fixture
def shop_postgres_connection():
    """The shop schema as PostgreSQL's catalog reports it."""
    return FakeConnection(
        tables=["users", "orders"],
        constraints={
            "users": [("PRIMARY KEY", "id", "public", "users", "id", 1)],
            "orders": [
                ("PRIMARY KEY", "id", "public", "orders", "id", 1),
                ("FOREIGN KEY", "user_id", "public", "users", "id", 1),
            ],
        },
        columns={
            "users": [
                postgres_column(
                    "id", "integer", nullable=False,
                    default="nextval('users_id_seq'::regclass)", extra="auto_increment",
                ),
                postgres_column("name", "character varying", "character varying(50)", nullable=False),
                postgres_column("bio", "character varying"),
                postgres_column("token", "uuid"),
                postgres_column("created_at", "timestamp with time zone", default="now()"),
            ],
            "orders": [
                postgres_column("id", "bigint", nullable=False),
                postgres_column("user_id", "integer"),
                postgres_column("total", "numeric", "numeric(10,2)"),
                postgres_column("ratio", "numeric"),
                postgres_column("payload", "jsonb"),
            ],
        },
    )
