"""Base adapter abstract class for database-specific implementations."""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Standard information_schema join: base tables only, catalog scan order.
INFORMATION_SCHEMA_CATALOG_QUERY = """
    SELECT
        t.table_schema,
        t.table_name,
        c.column_name,
        c.data_type
    FROM
        information_schema.tables t
    JOIN
        information_schema.columns c
        ON t.table_name = c.table_name
        AND t.table_schema = c.table_schema
    WHERE
        t.table_type = 'BASE TABLE'
"""


class BaseAdapter(ABC):
    """Base adapter defining the database-specific pieces of the gateway."""

    #: Dialect name as it appears in the URL drivername
    dialect: str = ""

    #: SQLAlchemy isolation level name applied to every transaction
    isolation_level: str = "READ COMMITTED"

    @property
    @abstractmethod
    def catalog_query(self) -> str:
        """
        SQL returning (table schema, table name, column name, column type).

        One row per column of every base table; views and other catalog
        object kinds are excluded. No ORDER BY: rows come back in the
        catalog's own scan order.
        """
        ...

    @abstractmethod
    def connect_args(self, connect_timeout: Optional[int]) -> dict[str, Any]:
        """
        Driver keyword arguments for opening a connection.

        Args:
            connect_timeout: Connect timeout in seconds, None for driver default

        Returns:
            Keyword arguments passed to the DBAPI connect() call
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(isolation_level={self.isolation_level!r})"
