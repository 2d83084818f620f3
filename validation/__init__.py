"""Validation module for resolving relations against parsed tables."""

from validation.relation_checker import (
    describe_relation,
    endpoint_exists,
    is_resolved,
    split_relations,
    unknown_direction_relations,
)

__all__ = [
    "endpoint_exists",
    "is_resolved",
    "split_relations",
    "unknown_direction_relations",
    "describe_relation",
]
