"""Arbitrary statement execution inside a read-committed transaction."""

import logging

from sqlalchemy import Connection

from db_gateway_mcp.adapters.base import BaseAdapter
from db_gateway_mcp.core.connection import (
    DRIVER_ERRORS,
    VERBATIM,
    ConnectionGateway,
    run_in_transaction,
)
from db_gateway_mcp.models.query import ResultSet
from db_gateway_mcp.models.result import Err, Failure, FailureKind, Ok, Result

logger = logging.getLogger(__name__)


class QueryExecutor:
    """
    Executes caller-supplied SQL and materializes the rows.

    The statement is not inspected or rewritten. Callers are responsible for
    supplying safe SQL; any statement the driver accepts is run.
    """

    def __init__(self, gateway: ConnectionGateway, adapter: BaseAdapter):
        """
        Initialize query executor.

        Args:
            gateway: Connection gateway opening one connection per call
            adapter: Database-specific adapter
        """
        self.gateway = gateway
        self.adapter = adapter

    def execute(self, query: str) -> Result[ResultSet]:
        """
        Execute a statement and return its rows.

        Args:
            query: SQL statement, executed verbatim as a single statement

        Returns:
            Ok with the materialized result set (empty for statements that
            return no rows), or Err with the driver's message
        """
        with self.gateway.connect() as opened:
            if isinstance(opened, Err):
                return opened

            return run_in_transaction(
                opened.value,
                self.adapter.isolation_level,
                lambda conn: self._materialize(conn, query),
                FailureKind.QUERY_EXECUTION,
            )

    def _materialize(self, conn: Connection, query: str) -> Result[ResultSet]:
        # Every row is fetched before the caller commits
        try:
            result = conn.exec_driver_sql(query, execution_options=VERBATIM)
            if not result.returns_rows:
                return Ok(ResultSet())
            columns = list(result.keys())
            rows = result.fetchall()
        except DRIVER_ERRORS as e:
            failure = Failure.from_exception(FailureKind.QUERY_EXECUTION, e)
            logger.warning(f"Query failed: {failure.message}")
            return Err(failure)

        return Ok(ResultSet.from_driver_rows(columns, rows))
