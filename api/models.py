"""
API request and response models.

These Pydantic models define the contract between the rendering frontend
and the parsing backend. Field aliases keep the camelCase wire names
(`isPrimaryKey`, `fromTable`, ...) that the renderer consumes.
"""

from pydantic import BaseModel, Field

from schema.models import Column, Relation, SchemaModel


class ParseRequest(BaseModel):
    """Request payload for the /parse endpoint."""

    text: str = Field(
        default="",
        description="Full DBML text, as typed by the user at save time",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": (
                        "Table users {\n  id int [pk]\n  name varchar\n}\n\n"
                        "Table posts {\n  id int [pk]\n  user_id int [ref: > users.id]\n}"
                    )
                }
            ]
        }
    }


class ColumnOut(BaseModel):
    """A parsed column."""

    name: str = Field(..., description="Column name")
    type: str | None = Field(default=None, description="Declared type, null for one-token lines")
    is_primary_key: bool = Field(default=False, alias="isPrimaryKey", description="Marked [pk] or [primary key]")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_column(cls, column: Column) -> "ColumnOut":
        return cls(name=column.name, type=column.type, is_primary_key=column.is_primary_key)


class RelationOut(BaseModel):
    """A parsed relation between two (table, column) endpoints."""

    from_table: str = Field(..., alias="fromTable")
    from_column: str = Field(..., alias="fromColumn")
    direction: str = Field(..., description="One of '-', '<', '>', '<>' or an unrecognized marker verbatim")
    to_table: str = Field(..., alias="toTable")
    to_column: str = Field(..., alias="toColumn")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_relation(cls, relation: Relation) -> "RelationOut":
        return cls(
            from_table=relation.from_table,
            from_column=relation.from_column,
            direction=relation.direction,
            to_table=relation.to_table,
            to_column=relation.to_column,
        )


class ParseResponse(BaseModel):
    """Response payload from the /parse endpoint."""

    tables: dict[str, list[ColumnOut]] = Field(
        default_factory=dict,
        description="Table name to ordered column list",
    )
    relations: list[RelationOut] = Field(
        default_factory=list,
        description="Unique relations in first-occurrence order",
    )
    unresolved_relations: list[RelationOut] = Field(
        default_factory=list,
        description="Relations with an endpoint missing from tables (not drawable)",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Conditions worth showing the user, e.g. no tables found",
    )

    @classmethod
    def from_schema(
        cls,
        schema: SchemaModel,
        unresolved: list[Relation] | None = None,
        warnings: list[str] | None = None,
    ) -> "ParseResponse":
        return cls(
            tables={
                name: [ColumnOut.from_column(c) for c in table.columns]
                for name, table in schema.tables.items()
            },
            relations=[RelationOut.from_relation(r) for r in schema.relations],
            unresolved_relations=[RelationOut.from_relation(r) for r in (unresolved or [])],
            warnings=list(warnings or []),
        )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    version: str = "0.1.0"
