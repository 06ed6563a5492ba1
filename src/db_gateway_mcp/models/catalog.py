"""Schema catalog models."""

from pydantic import BaseModel, Field


class ColumnDescriptor(BaseModel):
    """One column of a base table, as reported by the catalog."""

    schema: str = Field(..., description="Schema the table belongs to")
    table: str = Field(..., description="Table name")
    name: str = Field(..., description="Column name")
    type: str = Field(..., description="Declared column type name")

    model_config = {"frozen": True}

    def to_json_dict(self) -> dict[str, str]:
        """Public JSON shape of a column entry."""
        return {"schema": self.schema, "name": self.name, "type": self.type}


class SchemaCatalog(BaseModel):
    """
    Mapping from table key to its columns in catalog scan order.

    By default the key is the bare table name, so same-named tables in
    different schemas fold into one entry. With schema_qualified_keys the key
    is "schema.table".
    """

    tables: dict[str, list[ColumnDescriptor]] = Field(default_factory=dict)
    schema_qualified_keys: bool = Field(default=False)

    def key_for(self, column: ColumnDescriptor) -> str:
        if self.schema_qualified_keys:
            return f"{column.schema}.{column.table}"
        return column.table

    def add(self, column: ColumnDescriptor) -> None:
        """Append a column under its table key, creating the entry on first use."""
        key = self.key_for(column)
        if key not in self.tables:
            self.tables[key] = []
        self.tables[key].append(column)
