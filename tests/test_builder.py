"""End-to-end tests for the two-pass schema model builder."""

import pytest

from schemagen.database import (
    MySQLAdapter,
    PostgresAdapter,
    Reference,
    SchemaModelBuilder,
    SemanticType,
    build_schema_model,
)
from schemagen.errors import MetadataQueryError, UnknownTypeError

from .fixtures import FakeConnection, mysql_column, postgres_column


def by_name(tables):
    return {table.name: table for table in tables}


class TestScenarios:
    """The shop schema through the MySQL adapter."""

    @pytest.fixture
    def model(self, shop_mysql_connection):
        builder = SchemaModelBuilder(MySQLAdapter(shop_mysql_connection))
        tables = by_name(builder.build())
        return builder, tables

    def test_auto_increment_table(self, model):
        _, tables = model
        users = tables["users"]

        assert users.pk == "id"
        id_col, name, created_at, email = users.columns
        assert id_col.tag.auto is True
        assert name.tag.size == "50"
        assert name.tag.null is False
        assert created_at.tag.auto_now_add is True
        assert users.import_time_pkg is True
        assert users.uk == ["email"]
        assert email.tag.comment == "login address"

    def test_composite_key_table(self, model):
        builder, tables = model
        order_items = tables["order_items"]

        assert order_items.pk == ""
        assert order_items.pk_type is None
        assert "order_items" in builder.blacklist
        assert [c.name for c in order_items.columns] == ["Orders", "ItemId", "Price"]

    def test_foreign_key_to_usable_table(self, model):
        _, tables = model
        user = tables["orders"].get_column("user_id")

        assert user.name == "Users"
        assert user.type == Reference("Users", nullable=True)
        assert user.tag.rel_fk is True
        assert user.tag.table_fk == "users"

    def test_forward_reference_to_blacklisted_table(self, model):
        _, tables = model
        orders = tables["orders"]
        item = orders.get_column("order_item_id")

        assert item.name == "OrderItemId"
        assert item.type == SemanticType.INT32
        assert item.tag.rel_fk is False
        assert item.tag.table_fk == ""
        assert [fk.name for fk in orders.degraded_foreign_keys] == ["order_item_id"]

    def test_orders_details(self, model):
        _, tables = model
        orders = tables["orders"]

        assert orders.pk_type == SemanticType.UINT64
        assert orders.get_column("quantity").type == SemanticType.UINT32
        assert orders.get_column("updated_at").tag.auto_now is True
        assert orders.has_soft_delete is True
        assert tables["users"].has_soft_delete is False

    def test_primary_key_empty_iff_blacklisted(self, model):
        builder, tables = model
        for table in tables.values():
            assert (table.pk == "") == (table.name in builder.blacklist)

    def test_listing_order_is_kept(self, shop_mysql_connection):
        tables = build_schema_model(MySQLAdapter(shop_mysql_connection))

        assert [t.name for t in tables] == ["orders", "order_items", "users"]


class TestPassOrdering:
    """Every constraint query runs before any column query."""

    def test_constraints_before_columns(self, shop_mysql_connection):
        SchemaModelBuilder(MySQLAdapter(shop_mysql_connection)).build()

        kinds = shop_mysql_connection.query_kinds()
        assert kinds == ["tables"] + ["constraints"] * 3 + ["columns"] * 3

    def test_blacklist_is_sealed_after_build(self, shop_mysql_connection):
        builder = SchemaModelBuilder(MySQLAdapter(shop_mysql_connection))
        builder.build()

        assert builder.blacklist.sealed

    def test_rebuild_starts_with_fresh_blacklist(self, shop_mysql_connection):
        builder = SchemaModelBuilder(MySQLAdapter(shop_mysql_connection))
        builder.build()
        tables = by_name(builder.build(["users"]))

        assert len(builder.blacklist) == 0
        assert tables["users"].pk == "id"


class TestTableSelection:
    """Explicit table selection skips the catalog listing."""

    def test_explicit_selection(self, shop_mysql_connection):
        tables = build_schema_model(MySQLAdapter(shop_mysql_connection), ["users", "orders", "users"])

        assert [t.name for t in tables] == ["users", "orders"]
        assert "tables" not in shop_mysql_connection.query_kinds()

    def test_unselected_target_is_not_blacklisted(self, shop_mysql_connection):
        tables = by_name(build_schema_model(MySQLAdapter(shop_mysql_connection), ["orders"]))

        item = tables["orders"].get_column("order_item_id")
        assert item.is_reference
        assert item.tag.table_fk == "order_items"


class TestTablesWithoutKey:
    """Tables with no primary key are not foreign key targets."""

    def test_reference_to_keyless_table_degrades(self):
        connection = FakeConnection(
            tables=["orders", "audit_log"],
            constraints={
                "audit_log": [("UNIQUE", "code", None, None, None, 1)],
                "orders": [
                    ("PRIMARY KEY", "id", None, None, None, 1),
                    ("FOREIGN KEY", "log_code", "shop", "audit_log", "code", 1),
                ],
            },
            columns={
                "audit_log": [mysql_column("code", "varchar", "varchar(20)", nullable=False)],
                "orders": [
                    mysql_column("id", "int", "int(11)", nullable=False, extra="auto_increment"),
                    mysql_column("log_code", "varchar", "varchar(20)"),
                ],
            },
        )
        builder = SchemaModelBuilder(MySQLAdapter(connection))
        tables = by_name(builder.build())

        assert "audit_log" in builder.blacklist
        log_code = tables["orders"].get_column("log_code")
        assert log_code.name == "LogCode"
        assert log_code.type == SemanticType.STRING
        assert log_code.tag.rel_fk is False
        assert log_code.tag.size == "20"
        for table in tables.values():
            assert (table.pk == "") == (table.name in builder.blacklist)


class TestFailures:
    """Errors abort the whole build."""

    def test_unknown_type_aborts(self):
        connection = FakeConnection(
            tables=["users", "wallets"],
            constraints={"wallets": [("PRIMARY KEY", "id", "public", "wallets", "id", 1)]},
            columns={
                "users": [postgres_column("id", "integer")],
                "wallets": [
                    postgres_column("id", "integer"),
                    postgres_column("balance", "money"),
                ],
            },
        )

        with pytest.raises(UnknownTypeError) as exc_info:
            build_schema_model(PostgresAdapter(connection))

        assert exc_info.value.native_type == "money"
        assert exc_info.value.table == "wallets"
        assert exc_info.value.column == "balance"

    @pytest.mark.parametrize("kind", ["tables", "constraints", "columns"])
    def test_query_failure_aborts(self, shop_mysql_connection, kind):
        shop_mysql_connection.fail_on = kind

        with pytest.raises(MetadataQueryError) as exc_info:
            build_schema_model(MySQLAdapter(shop_mysql_connection))

        assert "simulated failure" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestPostgresModel:
    """The shop schema through the PostgreSQL adapter."""

    def test_model(self, shop_postgres_connection):
        tables = by_name(build_schema_model(PostgresAdapter(shop_postgres_connection)))
        users, orders = tables["users"], tables["orders"]

        assert users.columns[0].tag.auto is True
        assert users.get_column("name").tag.size == "50"
        assert users.get_column("bio").tag.size == ""
        assert users.get_column("token").tag.type == "uuid"
        assert users.get_column("created_at").tag.auto_now_add is True

        assert orders.columns[0].tag.pk is True
        assert orders.pk_type == SemanticType.INT64
        assert orders.get_column("user_id").type == Reference("Users")
        assert orders.get_column("total").tag.digits == "10"
        assert orders.get_column("payload").tag.type == "jsonb"
