"""Pytest configuration and fixtures for db-gateway-mcp tests.

This module provides global pytest configuration and custom warning filters.
"""

import warnings

# Filter Pydantic warning about 'schema' field shadowing BaseModel attribute
# This is intentional - ColumnDescriptor needs the 'schema' field for schema names
warnings.filterwarnings(
    "ignore",
    message=r".*Field name \"schema\".*shadows an attribute.*",
    category=UserWarning,
)
