"""Pytest configuration and shared fixtures for gateway tests"""

import os
from pathlib import Path
from typing import Iterator, Optional

import pytest
from dotenv import load_dotenv
from sqlalchemy import create_engine

from db_gateway_mcp.adapters import create_adapter
from db_gateway_mcp.adapters.base import BaseAdapter
from db_gateway_mcp.core import ConnectionGateway, DatabaseGateway
from db_gateway_mcp.models.config import DatabaseConfig
from db_gateway_mcp.utils.recorder import MemoryCallRecorder

# Load environment variables
load_dotenv()

SEED_STATEMENTS = [
    "CREATE TABLE T (id INT, name VARCHAR, note VARCHAR)",
    "INSERT INTO T VALUES (1, 'a', NULL)",
    """
    CREATE TABLE orders (
        order_id INTEGER PRIMARY KEY,
        customer TEXT NOT NULL,
        amount NUMERIC,
        placed_at TEXT,
        receipt BLOB
    )
    """,
    "INSERT INTO orders VALUES (1, 'alice', 250, '2024-01-15 10:30:00', X'DEADBEEF')",
    "INSERT INTO orders VALUES (2, 'bob', 19.5, '2024-01-16 08:00:00', NULL)",
    "INSERT INTO orders VALUES (3, 'null', 0, '', NULL)",
    "CREATE VIEW big_orders AS SELECT * FROM orders WHERE amount > 100",
]


# ==================== SQLite Fixtures ====================


@pytest.fixture
def sqlite_path(tmp_path: Path) -> Path:
    """File-backed SQLite database seeded with test tables and a view"""
    path = tmp_path / "gateway.db"
    engine = create_engine(f"sqlite:///{path}")
    try:
        with engine.begin() as conn:
            for statement in SEED_STATEMENTS:
                conn.exec_driver_sql(statement)
    finally:
        engine.dispose()
    return path


@pytest.fixture
def sqlite_config(sqlite_path: Path) -> DatabaseConfig:
    """SQLite database configuration"""
    return DatabaseConfig(url=f"sqlite:///{sqlite_path}")


@pytest.fixture
def unreachable_config(tmp_path: Path) -> DatabaseConfig:
    """Configuration pointing at a database file that cannot be opened"""
    return DatabaseConfig(url=f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")


@pytest.fixture
def sqlite_adapter(sqlite_config: DatabaseConfig) -> BaseAdapter:
    """SQLite adapter instance"""
    return create_adapter(sqlite_config)


@pytest.fixture
def connection_gateway(
    sqlite_config: DatabaseConfig, sqlite_adapter: BaseAdapter
) -> ConnectionGateway:
    """Connection gateway for the seeded SQLite database"""
    return ConnectionGateway(sqlite_config, sqlite_adapter)


@pytest.fixture
def recorder() -> MemoryCallRecorder:
    """In-memory call recorder"""
    return MemoryCallRecorder()


@pytest.fixture
def gateway(
    sqlite_config: DatabaseConfig, recorder: MemoryCallRecorder
) -> DatabaseGateway:
    """Gateway facade over the seeded SQLite database"""
    return DatabaseGateway(sqlite_config, recorder=recorder)


# ==================== PostgreSQL Fixtures ====================


@pytest.fixture(scope="session")
def pg_database_url() -> Optional[str]:
    """PostgreSQL test database URL from environment"""
    return os.getenv("PG_TEST_DATABASE_URL")


@pytest.fixture
def pg_config(pg_database_url: Optional[str]) -> DatabaseConfig:
    """PostgreSQL database configuration"""
    if not pg_database_url:
        pytest.skip("PG_TEST_DATABASE_URL not set in environment")
    return DatabaseConfig(url=pg_database_url)


@pytest.fixture
def pg_gateway(pg_config: DatabaseConfig) -> Iterator[DatabaseGateway]:
    """Gateway over PostgreSQL with a scratch schema that is dropped afterwards"""
    gateway = DatabaseGateway(pg_config)
    gateway.query("DROP SCHEMA IF EXISTS gateway_test CASCADE")
    gateway.query("CREATE SCHEMA gateway_test")
    try:
        yield gateway
    finally:
        gateway.query("DROP SCHEMA IF EXISTS gateway_test CASCADE")


# ==================== Pytest Configuration ====================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "sqlite: Tests against file-backed SQLite")
    config.addinivalue_line("markers", "postgresql: PostgreSQL-specific tests")
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring database"
    )
