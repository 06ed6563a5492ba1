"""MySQL adapter."""

from typing import Any, Optional

from db_gateway_mcp.adapters.base import INFORMATION_SCHEMA_CATALOG_QUERY, BaseAdapter


class MySQLAdapter(BaseAdapter):
    """MySQL / MariaDB adapter (PyMySQL)."""

    dialect = "mysql"

    @property
    def catalog_query(self) -> str:
        # MySQL calls databases schemas; limit to the connected database
        return INFORMATION_SCHEMA_CATALOG_QUERY + "        AND t.table_schema = DATABASE()\n"

    def connect_args(self, connect_timeout: Optional[int]) -> dict[str, Any]:
        if connect_timeout is None:
            return {}
        return {"connect_timeout": connect_timeout}
