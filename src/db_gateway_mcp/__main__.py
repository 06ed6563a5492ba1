"""Entry point for running db_gateway_mcp as a module."""

from db_gateway_mcp.server import cli_entry

if __name__ == "__main__":
    cli_entry()
