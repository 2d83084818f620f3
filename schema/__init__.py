"""Schema parsing and representation module."""

from schema.models import Column, Relation, RelationDirection, SchemaModel, Table
from schema.parser import (
    InputTooLargeError,
    RelationSet,
    SchemaParseError,
    extract_tables,
    parse_dbml,
    resolve_relations,
)

__all__ = [
    "Column",
    "Table",
    "Relation",
    "RelationDirection",
    "SchemaModel",
    "RelationSet",
    "extract_tables",
    "resolve_relations",
    "parse_dbml",
    "SchemaParseError",
    "InputTooLargeError",
]
