"""JSON encoding of result sets and catalogs using orjson.

Every cell is encoded from its CellKind:

- NULL → null, never a string
- integers and decimals → JSON numbers carrying their exact digits; values
  orjson cannot represent natively (beyond 64 bits, Decimal) are written as
  raw number fragments so nothing passes through a float
- NaN and infinities → "NaN", "Infinity", "-Infinity"
- datetime, date, time → ISO 8601
- timedelta → ISO 8601 duration (P1DT2H3M4.5S)
- bytes → base64
- UUID → canonical string
- arrays and JSON documents → nested JSON, encoded recursively

Output is compact (no whitespace) and deterministic for a given input.
"""

import base64
import datetime
import decimal
import math
from typing import Any, Callable, TypeVar

import orjson

from db_gateway_mcp.models.catalog import SchemaCatalog
from db_gateway_mcp.models.query import Cell, CellKind, ResultSet
from db_gateway_mcp.models.result import Err, Failure, FailureKind, Ok, Result

T = TypeVar("T")

# orjson serializes int natively only within this range
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


def _encode_integer(value: int) -> Any:
    if _INT_MIN <= value <= _INT_MAX:
        return value
    return orjson.Fragment(str(value))


def _encode_float(value: float) -> Any:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def _encode_decimal(value: decimal.Decimal) -> Any:
    if not value.is_finite():
        # str() gives "NaN", "sNaN", "Infinity" or "-Infinity"
        return str(value)
    return orjson.Fragment(str(value))


def _encode_interval(value: datetime.timedelta) -> str:
    sign = "-" if value < datetime.timedelta(0) else ""
    value = abs(value)
    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    duration = f"{sign}P"
    if value.days:
        duration += f"{value.days}D"

    clock = ""
    if hours:
        clock += f"{hours}H"
    if minutes:
        clock += f"{minutes}M"
    if value.microseconds:
        clock += f"{seconds}.{value.microseconds:06d}".rstrip("0") + "S"
    elif seconds:
        clock += f"{seconds}S"

    if clock:
        duration += f"T{clock}"
    elif not value.days:
        duration += "T0S"
    return duration


def _encode_binary(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _encode_composite(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: encode_cell(cell) for key, cell in value.items()}
    return [encode_cell(cell) for cell in value]


_CELL_ENCODERS: dict[CellKind, Callable[[Any], Any]] = {
    CellKind.NULL: lambda _: None,
    CellKind.BOOLEAN: bool,
    CellKind.INTEGER: _encode_integer,
    CellKind.FLOAT: _encode_float,
    CellKind.DECIMAL: _encode_decimal,
    CellKind.STRING: str,
    CellKind.DATETIME: lambda value: value.isoformat(),
    CellKind.DATE: lambda value: value.isoformat(),
    CellKind.TIME: lambda value: value.isoformat(),
    CellKind.INTERVAL: _encode_interval,
    CellKind.BINARY: _encode_binary,
    CellKind.UUID: str,
    CellKind.COMPOSITE: _encode_composite,
    CellKind.TEXT: str,
}


def encode_cell(cell: Cell) -> Any:
    """
    Convert a tagged cell into a value orjson serializes without a default.

    Args:
        cell: Tagged driver value

    Returns:
        None, bool, int, float, str, orjson.Fragment, list or dict
    """
    return _CELL_ENCODERS[cell.kind](cell.value)


def encode_rows(result_set: ResultSet) -> list[dict[str, Any]]:
    """Convert every row to a dict of JSON-ready values, keys in column order."""
    return [
        {column: encode_cell(cell) for column, cell in row.items()}
        for row in result_set.rows
    ]


def dumps(obj: Any) -> str:
    """
    Serialize object to a compact JSON string using orjson.

    Args:
        obj: Object to serialize

    Returns:
        JSON string
    """
    return orjson.dumps(obj).decode("utf-8")


def encode_result_set(result_set: ResultSet) -> str:
    """Encode rows as a JSON array of objects."""
    return dumps(encode_rows(result_set))


def encode_catalog(catalog: SchemaCatalog) -> str:
    """Encode the catalog as a JSON object of table key to column entries."""
    return dumps(
        {
            key: [column.to_json_dict() for column in columns]
            for key, columns in catalog.tables.items()
        }
    )


def encode_error(message: str) -> str:
    """Encode a failure message as {"error": message}."""
    return dumps({"error": message})


def serialize(result: Result[T], encoder: Callable[[T], str]) -> Result[str]:
    """
    Encode the value of a successful result.

    Args:
        result: Operation result
        encoder: Encoder for the success value

    Returns:
        Ok with the JSON text, the incoming Err unchanged, or an ENCODING Err
        when orjson rejects the data (e.g. strings holding lone surrogates)
    """
    if isinstance(result, Err):
        return result
    try:
        return Ok(encoder(result.value))
    except orjson.JSONEncodeError as e:
        return Err(Failure.from_exception(FailureKind.ENCODING, e))


def render(result: Result[str]) -> str:
    """JSON text of a successful result, or its error object."""
    if isinstance(result, Err):
        return encode_error(result.message)
    return result.value
