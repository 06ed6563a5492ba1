"""Models for gateway configuration, catalogs, results and failures."""

from .catalog import ColumnDescriptor, SchemaCatalog
from .config import ConfigurationError, DatabaseConfig, load_config
from .query import Cell, CellKind, ResultSet, classify
from .result import Err, Failure, FailureKind, Ok, Result

__all__ = [
    "Cell",
    "CellKind",
    "ColumnDescriptor",
    "ConfigurationError",
    "DatabaseConfig",
    "Err",
    "Failure",
    "FailureKind",
    "Ok",
    "Result",
    "ResultSet",
    "SchemaCatalog",
    "classify",
    "load_config",
]
