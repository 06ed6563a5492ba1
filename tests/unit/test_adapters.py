"""Unit tests for dialect adapters and the adapter factory."""

import pytest

from db_gateway_mcp.adapters import (
    MSSQLAdapter,
    MySQLAdapter,
    PostgresAdapter,
    SQLiteAdapter,
    create_adapter,
)
from db_gateway_mcp.models.config import DatabaseConfig


class TestAdapterFactory:
    """Adapter selection from the connection URL."""

    @pytest.mark.parametrize(
        "url, adapter_class",
        [
            ("postgresql+psycopg://u:p@localhost/db", PostgresAdapter),
            ("mysql+pymysql://u:p@localhost/db", MySQLAdapter),
            ("mssql+pyodbc://u:p@dsn", MSSQLAdapter),
            ("sqlite:///gateway.db", SQLiteAdapter),
        ],
    )
    def test_create_adapter(self, url, adapter_class):
        assert isinstance(create_adapter(DatabaseConfig(url=url)), adapter_class)

    def test_unsupported_dialect(self):
        config = DatabaseConfig.model_construct(url="oracle://u:p@localhost/db")
        with pytest.raises(ValueError, match="Unsupported database dialect"):
            create_adapter(config)


class TestIsolationLevels:
    """Every dialect reads committed data."""

    @pytest.mark.parametrize("adapter_class", [PostgresAdapter, MySQLAdapter, MSSQLAdapter])
    def test_read_committed(self, adapter_class):
        assert adapter_class().isolation_level == "READ COMMITTED"

    def test_sqlite_serializable(self):
        assert SQLiteAdapter().isolation_level == "SERIALIZABLE"


class TestCatalogQueries:
    """Catalog queries list base tables only, unordered."""

    @pytest.mark.parametrize("adapter_class", [PostgresAdapter, MySQLAdapter, MSSQLAdapter])
    def test_information_schema_base_tables(self, adapter_class):
        query = adapter_class().catalog_query
        assert "information_schema.tables" in query
        assert "'BASE TABLE'" in query
        assert "ORDER BY" not in query.upper()

    def test_postgres_hides_system_schemas(self):
        query = PostgresAdapter().catalog_query
        assert "pg_catalog" in query
        assert "information_schema" in query

    def test_mysql_current_database_only(self):
        assert "DATABASE()" in MySQLAdapter().catalog_query

    def test_sqlite_tables_only(self):
        query = SQLiteAdapter().catalog_query
        assert "m.type = 'table'" in query
        assert "sqlite_%" in query


class TestConnectArgs:
    """Connect timeout is passed under each driver's own keyword."""

    def test_no_timeout(self):
        for adapter_class in (PostgresAdapter, MySQLAdapter, MSSQLAdapter, SQLiteAdapter):
            assert adapter_class().connect_args(None) == {}

    def test_postgres(self):
        assert PostgresAdapter().connect_args(5) == {"connect_timeout": 5}

    def test_mysql(self):
        assert MySQLAdapter().connect_args(5) == {"connect_timeout": 5}

    def test_mssql(self):
        assert MSSQLAdapter().connect_args(5) == {"timeout": 5}

    def test_sqlite(self):
        assert SQLiteAdapter().connect_args(5) == {"timeout": 5}


def test_repr():
    assert repr(SQLiteAdapter()) == "SQLiteAdapter(isolation_level='SERIALIZABLE')"
