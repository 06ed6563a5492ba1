"""Microsoft SQL Server adapter."""

from typing import Any, Optional

from db_gateway_mcp.adapters.base import INFORMATION_SCHEMA_CATALOG_QUERY, BaseAdapter


class MSSQLAdapter(BaseAdapter):
    """SQL Server adapter (pyodbc / pymssql)."""

    dialect = "mssql"

    @property
    def catalog_query(self) -> str:
        # information_schema is already scoped to the current database
        return INFORMATION_SCHEMA_CATALOG_QUERY

    def connect_args(self, connect_timeout: Optional[int]) -> dict[str, Any]:
        if connect_timeout is None:
            return {}
        return {"timeout": connect_timeout}
