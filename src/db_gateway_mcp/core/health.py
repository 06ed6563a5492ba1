"""Connection health check."""

from db_gateway_mcp.core.connection import ConnectionGateway
from db_gateway_mcp.models.result import Ok

HEALTHY = "Connection is OK"
FAILED_PREFIX = "Connection failed: "


class HealthChecker:
    """Reports whether a connection can be opened."""

    def __init__(self, gateway: ConnectionGateway):
        self.gateway = gateway

    def check(self) -> str:
        """Open a connection, close it at once and describe the outcome."""
        with self.gateway.connect() as opened:
            if isinstance(opened, Ok):
                return HEALTHY
            return f"{FAILED_PREFIX}{opened.message}"
