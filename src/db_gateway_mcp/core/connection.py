"""Short-lived database connections and transaction scoping with SQLAlchemy."""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from db_gateway_mcp.adapters.base import BaseAdapter
from db_gateway_mcp.models.config import DatabaseConfig
from db_gateway_mcp.models.result import Err, Failure, FailureKind, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Passed to exec_driver_sql so statement text reaches the DBAPI cursor as-is
VERBATIM = {"no_parameters": True}

# Drivers raise some errors outside the DBAPI hierarchy, e.g. UnicodeEncodeError
# for statement text that cannot be encoded for the wire
DRIVER_ERRORS = (SQLAlchemyError, ValueError)


class ConnectionGateway:
    """Opens exactly one physical connection per call and always releases it."""

    def __init__(self, config: DatabaseConfig, adapter: BaseAdapter):
        """
        Initialize connection gateway.

        Args:
            config: Database configuration with connection URL
            adapter: Database-specific adapter supplying driver arguments
        """
        self.config = config
        self.adapter = adapter

    def _create_engine(self) -> Engine:
        # NullPool: closing the connection closes the physical connection
        return create_engine(
            self.config.url,
            poolclass=NullPool,
            echo=self.config.echo_sql,
            connect_args=self.adapter.connect_args(self.config.connect_timeout),
        )

    def open(self) -> Result[Connection]:
        """
        Open a new connection.

        Returns:
            Ok with the open connection, or Err with a CONNECTION failure
        """
        engine = None
        try:
            engine = self._create_engine()
            return Ok(engine.connect())
        except (SQLAlchemyError, ValueError, ImportError) as e:
            # ImportError: the URL names a DBAPI driver that is not installed
            # ValueError: e.g. a SQLite path with an embedded NUL
            if engine is not None:
                engine.dispose()
            failure = Failure.from_exception(FailureKind.CONNECTION, e)
            logger.warning(f"Connection to {self.config.safe_url} failed: {failure.message}")
            return Err(failure)

    @contextmanager
    def connect(self) -> Iterator[Result[Connection]]:
        """
        Open a connection for the duration of a with-block.

        Yields:
            Ok with the open connection, or Err with a CONNECTION failure.
            The connection is closed and its engine disposed on every exit
            path; closing rolls back any transaction still open.
        """
        opened = self.open()
        try:
            yield opened
        finally:
            if isinstance(opened, Ok):
                self._release(opened.value)

    def _release(self, connection: Connection) -> None:
        engine = connection.engine
        try:
            connection.close()
        except SQLAlchemyError as e:
            logger.warning(f"Error closing connection: {e}")
        finally:
            engine.dispose()


def run_in_transaction(
    connection: Connection,
    isolation_level: str,
    work: Callable[[Connection], Result[T]],
    kind: FailureKind,
) -> Result[T]:
    """
    Run work inside one transaction at a fixed isolation level.

    The transaction is committed explicitly once work returns Ok. When work
    returns Err, or the commit fails, nothing is committed and the open
    transaction is rolled back when the owning connection is closed.

    Args:
        connection: Freshly opened connection with no transaction begun
        isolation_level: SQLAlchemy isolation level name
        work: Callable producing the operation result from the connection
        kind: Failure kind reported for begin and commit errors

    Returns:
        Result of work, or Err if the transaction could not begin or commit
    """
    try:
        connection.execution_options(isolation_level=isolation_level)
        transaction = connection.begin()
    except DRIVER_ERRORS as e:
        failure = Failure.from_exception(kind, e)
        logger.warning(f"Could not begin {isolation_level} transaction: {failure.message}")
        return Err(failure)

    outcome = work(connection)
    if isinstance(outcome, Err):
        return outcome

    try:
        transaction.commit()
    except DRIVER_ERRORS as e:
        failure = Failure.from_exception(kind, e)
        logger.warning(f"Commit failed: {failure.message}")
        return Err(failure)

    return outcome
