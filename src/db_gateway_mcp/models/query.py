"""Query result models: tagged cells, rows and result sets."""

import datetime
import decimal
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CellKind(Enum):
    """Closed set of value shapes a driver can hand back for one column."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    INTERVAL = "interval"
    BINARY = "binary"
    UUID = "uuid"
    COMPOSITE = "composite"
    TEXT = "text"


@dataclass(frozen=True)
class Cell:
    """A driver value tagged with its kind."""

    kind: CellKind
    value: Any = None


NULL_CELL = Cell(CellKind.NULL)


def classify(value: Any) -> Cell:
    """
    Tag a raw driver value with its CellKind.

    Order matters: bool is a subclass of int and datetime a subclass of date,
    so the narrower types are checked first.

    Args:
        value: Value as returned by the DBAPI driver

    Returns:
        Tagged cell; values with no dedicated kind become TEXT
    """
    if value is None:
        return NULL_CELL
    if isinstance(value, bool):
        return Cell(CellKind.BOOLEAN, value)
    if isinstance(value, int):
        return Cell(CellKind.INTEGER, value)
    if isinstance(value, float):
        return Cell(CellKind.FLOAT, value)
    if isinstance(value, decimal.Decimal):
        return Cell(CellKind.DECIMAL, value)
    if isinstance(value, str):
        return Cell(CellKind.STRING, value)
    if isinstance(value, datetime.datetime):
        return Cell(CellKind.DATETIME, value)
    if isinstance(value, datetime.date):
        return Cell(CellKind.DATE, value)
    if isinstance(value, datetime.time):
        return Cell(CellKind.TIME, value)
    if isinstance(value, datetime.timedelta):
        return Cell(CellKind.INTERVAL, value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Cell(CellKind.BINARY, bytes(value))
    if isinstance(value, uuid.UUID):
        return Cell(CellKind.UUID, value)
    if isinstance(value, dict):
        return Cell(
            CellKind.COMPOSITE, {str(k): classify(v) for k, v in value.items()}
        )
    if isinstance(value, (list, tuple)):
        return Cell(CellKind.COMPOSITE, [classify(v) for v in value])
    if isinstance(value, (set, frozenset)):
        # Sorted by text so repeated reads encode identically
        return Cell(CellKind.COMPOSITE, [classify(v) for v in sorted(value, key=str)])
    return Cell(CellKind.TEXT, str(value))


@dataclass
class ResultSet:
    """Rows of a statement, in driver order, with columns in declared order."""

    columns: list[str] = field(default_factory=list)
    rows: list[dict[str, Cell]] = field(default_factory=list)

    @classmethod
    def from_driver_rows(cls, columns: list[str], rows: list[Any]) -> "ResultSet":
        """Materialize driver rows, tagging every value."""
        return cls(
            columns=list(columns),
            rows=[
                {column: classify(value) for column, value in zip(columns, row)}
                for row in rows
            ],
        )
