"""The three public gateway operations.

Each operation records the call, does its own work on its own connection and
returns a string. Failures come back as data ("Connection failed: ..." or
{"error": ...}), never as exceptions.
"""

from typing import Optional

from db_gateway_mcp.adapters import create_adapter
from db_gateway_mcp.adapters.base import BaseAdapter
from db_gateway_mcp.core.connection import ConnectionGateway
from db_gateway_mcp.core.executor import QueryExecutor
from db_gateway_mcp.core.health import HealthChecker
from db_gateway_mcp.core.inspector import SchemaIntrospector
from db_gateway_mcp.models.config import DatabaseConfig
from db_gateway_mcp.utils.recorder import CallEvent, CallRecorder, NullCallRecorder
from db_gateway_mcp.utils.serialization import (
    encode_catalog,
    encode_result_set,
    render,
    serialize,
)


class DatabaseGateway:
    """Health check, schema listing and query execution over one database."""

    def __init__(
        self,
        config: DatabaseConfig,
        recorder: Optional[CallRecorder] = None,
        adapter: Optional[BaseAdapter] = None,
    ):
        """
        Initialize the gateway.

        Args:
            config: Database configuration
            recorder: Receives one event per call (defaults to discarding them)
            adapter: Dialect adapter (defaults to the one matching the URL)
        """
        self.config = config
        self.adapter = adapter or create_adapter(config)
        self.recorder: CallRecorder = recorder or NullCallRecorder()

        self.connections = ConnectionGateway(config, self.adapter)
        self.health = HealthChecker(self.connections)
        self.introspector = SchemaIntrospector(
            self.connections, self.adapter, config.schema_qualified_keys
        )
        self.executor = QueryExecutor(self.connections, self.adapter)

    def health_check(self) -> str:
        """Return "Connection is OK" or "Connection failed: <message>"."""
        self.recorder.record(CallEvent("HealthCheck"))
        return self.health.check()

    def get_schema(self) -> str:
        """Return the base table catalog as JSON, or {"error": ...}."""
        self.recorder.record(CallEvent("GetSchema"))
        return render(serialize(self.introspector.get_schema(), encode_catalog))

    def query(self, query: str) -> str:
        """Run a statement and return its rows as a JSON array, or {"error": ...}."""
        self.recorder.record(CallEvent("Query", query))
        return render(serialize(self.executor.execute(query), encode_result_set))
