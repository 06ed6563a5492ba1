"""Table and column catalog scanning."""

import logging
from typing import Any

from sqlalchemy import Connection

from db_gateway_mcp.adapters.base import BaseAdapter
from db_gateway_mcp.core.connection import (
    DRIVER_ERRORS,
    VERBATIM,
    ConnectionGateway,
    run_in_transaction,
)
from db_gateway_mcp.models.catalog import ColumnDescriptor, SchemaCatalog
from db_gateway_mcp.models.result import Err, Failure, FailureKind, Ok, Result

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    # Some MySQL versions hand back information_schema columns as bytes
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class SchemaIntrospector:
    """Builds the table to columns catalog from the database's own catalog."""

    def __init__(
        self,
        gateway: ConnectionGateway,
        adapter: BaseAdapter,
        schema_qualified_keys: bool = False,
    ):
        """
        Initialize schema introspector.

        Args:
            gateway: Connection gateway opening one connection per call
            adapter: Database-specific adapter supplying the catalog query
            schema_qualified_keys: Key tables by "schema.table"
        """
        self.gateway = gateway
        self.adapter = adapter
        self.schema_qualified_keys = schema_qualified_keys

    def get_schema(self) -> Result[SchemaCatalog]:
        """
        Scan every base table and its columns.

        The scan runs in a transaction so it reads one consistent snapshot.

        Returns:
            Ok with the catalog, or Err with the driver's message
        """
        with self.gateway.connect() as opened:
            if isinstance(opened, Err):
                return opened

            return run_in_transaction(
                opened.value,
                self.adapter.isolation_level,
                self._scan,
                FailureKind.CATALOG_QUERY,
            )

    def _scan(self, conn: Connection) -> Result[SchemaCatalog]:
        try:
            rows = conn.exec_driver_sql(
                self.adapter.catalog_query, execution_options=VERBATIM
            ).fetchall()
        except DRIVER_ERRORS as e:
            failure = Failure.from_exception(FailureKind.CATALOG_QUERY, e)
            logger.warning(f"Catalog query failed: {failure.message}")
            return Err(failure)

        catalog = SchemaCatalog(schema_qualified_keys=self.schema_qualified_keys)
        for schema_name, table_name, column_name, column_type in rows:
            catalog.add(
                ColumnDescriptor(
                    schema=_text(schema_name),
                    table=_text(table_name),
                    name=_text(column_name),
                    type=_text(column_type),
                )
            )
        return Ok(catalog)
