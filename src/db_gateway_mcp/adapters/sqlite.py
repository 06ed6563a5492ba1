"""SQLite adapter."""

from typing import Any, Optional

from db_gateway_mcp.adapters.base import BaseAdapter


class SQLiteAdapter(BaseAdapter):
    """SQLite adapter (stdlib sqlite3 through pysqlite)."""

    dialect = "sqlite"

    # SQLite has no READ COMMITTED; SERIALIZABLE is its only isolating level
    isolation_level = "SERIALIZABLE"

    @property
    def catalog_query(self) -> str:
        return """
            SELECT
                'main' AS table_schema,
                m.name AS table_name,
                p.name AS column_name,
                p.type AS data_type
            FROM
                sqlite_master m
            JOIN
                pragma_table_info(m.name) p
            WHERE
                m.type = 'table'
                AND m.name NOT LIKE 'sqlite_%'
        """

    def connect_args(self, connect_timeout: Optional[int]) -> dict[str, Any]:
        # sqlite3 "timeout" is the busy wait for a locked database file
        if connect_timeout is None:
            return {}
        return {"timeout": connect_timeout}
