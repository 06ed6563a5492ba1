"""Utility modules for the database gateway."""

from db_gateway_mcp.utils.recorder import (
    CallEvent,
    CallRecorder,
    FileCallRecorder,
    MemoryCallRecorder,
    NullCallRecorder,
)
from db_gateway_mcp.utils.serialization import (
    encode_catalog,
    encode_cell,
    encode_error,
    encode_result_set,
    render,
    serialize,
)

__all__ = [
    "CallEvent",
    "CallRecorder",
    "FileCallRecorder",
    "MemoryCallRecorder",
    "NullCallRecorder",
    "encode_catalog",
    "encode_cell",
    "encode_error",
    "encode_result_set",
    "render",
    "serialize",
]
