"""Core database operations layer."""

from .connection import ConnectionGateway, run_in_transaction
from .executor import QueryExecutor
from .gateway import DatabaseGateway
from .health import HealthChecker
from .inspector import SchemaIntrospector

__all__ = [
    "ConnectionGateway",
    "DatabaseGateway",
    "HealthChecker",
    "QueryExecutor",
    "SchemaIntrospector",
    "run_in_transaction",
]
