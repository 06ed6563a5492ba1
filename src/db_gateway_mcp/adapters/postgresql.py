"""PostgreSQL adapter."""

from typing import Any, Optional

from db_gateway_mcp.adapters.base import INFORMATION_SCHEMA_CATALOG_QUERY, BaseAdapter


class PostgresAdapter(BaseAdapter):
    """PostgreSQL adapter (psycopg / psycopg2)."""

    dialect = "postgresql"

    @property
    def catalog_query(self) -> str:
        # information_schema.tables also lists the system catalogs
        return (
            INFORMATION_SCHEMA_CATALOG_QUERY
            + "        AND t.table_schema NOT IN ('pg_catalog', 'information_schema')\n"
        )

    def connect_args(self, connect_timeout: Optional[int]) -> dict[str, Any]:
        if connect_timeout is None:
            return {}
        return {"connect_timeout": connect_timeout}
