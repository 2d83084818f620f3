"""
Relation endpoint checker.

Looks up each relation's endpoints in the parsed table map. The parser keeps
dangling references; this is where a consumer finds out which relations can
actually be drawn between two existing columns.
"""

from schema.models import Relation, SchemaModel


def endpoint_exists(schema: SchemaModel, table_name: str, column_name: str) -> bool:
    """Check if (table, column) names an existing column (exact match)."""
    return schema.has_column(table_name, column_name)


def is_resolved(schema: SchemaModel, relation: Relation) -> bool:
    """Check if both ends of a relation exist in the schema."""
    return (
        endpoint_exists(schema, relation.from_table, relation.from_column)
        and endpoint_exists(schema, relation.to_table, relation.to_column)
    )


def split_relations(schema: SchemaModel) -> tuple[list[Relation], list[Relation]]:
    """
    Partition relations by whether both endpoints resolve.

    Returns:
        Tuple of (resolved, unresolved), each in the schema's relation order
    """
    resolved: list[Relation] = []
    unresolved: list[Relation] = []

    for relation in schema.relations:
        if is_resolved(schema, relation):
            resolved.append(relation)
        else:
            unresolved.append(relation)

    return resolved, unresolved


def unknown_direction_relations(schema: SchemaModel) -> list[Relation]:
    """Relations whose marker is not one of `-`, `<`, `>`, `<>`."""
    return [r for r in schema.relations if r.known_direction is None]


def describe_relation(relation: Relation) -> str:
    """Format a relation as `table.col > other.col`."""
    return (
        f"{relation.from_table}.{relation.from_column} {relation.direction} "
        f"{relation.to_table}.{relation.to_column}"
    )
