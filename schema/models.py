"""
Internal schema representation models.

These dataclasses represent the structured form of a parsed DBML document:
tables with ordered columns plus a deduplicated list of relations.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class RelationDirection(str, Enum):
    """Directional markers shared by inline and standalone references."""

    NONE = "-"
    LEFT = "<"
    RIGHT = ">"
    BOTH = "<>"


@dataclass(frozen=True)
class Column:
    """Represents a column line inside a table block."""

    name: str
    type: str | None = None
    is_primary_key: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "isPrimaryKey": self.is_primary_key,
        }


@dataclass(frozen=True)
class Table:
    """Represents a table block."""

    name: str
    columns: tuple[Column, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Convert list to tuple if needed (for immutability)
        if isinstance(self.columns, list):
            object.__setattr__(self, "columns", tuple(self.columns))

    def has_column(self, column_name: str) -> bool:
        """Check if table has a column with the given name."""
        return self.get_column(column_name) is not None

    def get_column(self, column_name: str) -> Column | None:
        """Get column by exact name; the first declaration wins."""
        for col in self.columns:
            if col.name == column_name:
                return col
        return None

    def get_column_names(self) -> list[str]:
        """Get list of all column names."""
        return [c.name for c in self.columns]


@dataclass(frozen=True)
class Relation:
    """
    A directed edge between two (table, column) endpoints.

    Equality and hashing cover the full 5-tuple, so two statements that
    normalize to the same endpoints and marker are the same relation.
    """

    from_table: str
    from_column: str
    direction: str
    to_table: str
    to_column: str

    @property
    def known_direction(self) -> RelationDirection | None:
        """The marker as a RelationDirection, or None if it is not one of the four."""
        try:
            return RelationDirection(self.direction)
        except ValueError:
            return None

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        return (self.from_table, self.from_column, self.direction, self.to_table, self.to_column)

    def to_dict(self) -> dict[str, str]:
        return {
            "fromTable": self.from_table,
            "fromColumn": self.from_column,
            "direction": self.direction,
            "toTable": self.to_table,
            "toColumn": self.to_column,
        }


@dataclass(frozen=True)
class SchemaModel:
    """
    The result of one parse: a table map plus an ordered relation list.

    `tables` is exposed as a read-only mapping so a snapshot cannot be
    mutated after it is handed to a consumer. The mapping is unhashable,
    so the hash covers the relations only.
    """

    tables: Mapping[str, Table] = field(default_factory=dict, hash=False)
    relations: tuple[Relation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.tables, MappingProxyType):
            object.__setattr__(self, "tables", MappingProxyType(dict(self.tables)))
        if isinstance(self.relations, list):
            object.__setattr__(self, "relations", tuple(self.relations))

    @property
    def is_empty(self) -> bool:
        """Check if no table block was recognized."""
        return len(self.tables) == 0

    def has_table(self, table_name: str) -> bool:
        return table_name in self.tables

    def get_table(self, table_name: str) -> Table | None:
        return self.tables.get(table_name)

    def has_column(self, table_name: str, column_name: str) -> bool:
        """Check if a specific table has a specific column."""
        table = self.get_table(table_name)
        if table is None:
            return False
        return table.has_column(column_name)

    def get_table_names(self) -> list[str]:
        """Table names in order of first appearance in the text."""
        return list(self.tables)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form handed to the rendering side."""
        return {
            "tables": {
                name: [col.to_dict() for col in table.columns]
                for name, table in self.tables.items()
            },
            "relations": [rel.to_dict() for rel in self.relations],
        }
