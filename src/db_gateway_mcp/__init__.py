"""
db_gateway_mcp - Minimal relational database gateway for MCP clients

A Model Context Protocol (MCP) server that checks database connectivity, lists
base tables with their columns and runs arbitrary SQL, returning JSON.
"""

__version__ = "1.0.0"

from db_gateway_mcp.core import DatabaseGateway
from db_gateway_mcp.models.config import DatabaseConfig, load_config

__all__ = [
    "DatabaseConfig",
    "DatabaseGateway",
    "load_config",
]
