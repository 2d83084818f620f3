"""
Tests for the relation endpoint checker.
"""

from schema.models import Relation
from schema.parser import parse_dbml
from validation.relation_checker import (
    describe_relation,
    endpoint_exists,
    is_resolved,
    split_relations,
    unknown_direction_relations,
)


class TestEndpointExists:
    """Tests for endpoint lookups."""

    def test_existing_endpoint(self, minimal_dbml):
        schema = parse_dbml(minimal_dbml)
        assert endpoint_exists(schema, "T", "a")

    def test_missing_table(self, minimal_dbml):
        schema = parse_dbml(minimal_dbml)
        assert not endpoint_exists(schema, "U", "a")

    def test_missing_column(self, minimal_dbml):
        schema = parse_dbml(minimal_dbml)
        assert not endpoint_exists(schema, "T", "z")


class TestSplitRelations:
    """Tests for partitioning relations into drawable and dangling."""

    def test_all_resolved(self, sample_dbml):
        schema = parse_dbml(sample_dbml)
        resolved, unresolved = split_relations(schema)

        assert resolved == list(schema.relations)
        assert unresolved == []

    def test_dangling_relations_kept_in_order(self):
        text = (
            "Table A {\n  id int [pk]\n  b_id int [ref: > B.id]\n}\n"
            "Table C {\n  a_id int [ref: > A.id]\n}\n"
            'Ref: "A"."missing" - "C"."a_id"\n'
        )
        schema = parse_dbml(text)
        resolved, unresolved = split_relations(schema)

        assert resolved == [Relation("C", "a_id", ">", "A", "id")]
        assert unresolved == [
            Relation("A", "b_id", ">", "B", "id"),
            Relation("A", "missing", "-", "C", "a_id"),
        ]

    def test_is_resolved_checks_both_ends(self, minimal_dbml):
        schema = parse_dbml(minimal_dbml)

        assert is_resolved(schema, Relation("T", "a", "-", "T", "b"))
        assert not is_resolved(schema, Relation("T", "a", "-", "T", "c"))
        assert not is_resolved(schema, Relation("X", "a", "-", "T", "b"))

    def test_empty_schema(self):
        assert split_relations(parse_dbml("")) == ([], [])


class TestUnknownDirections:
    """Tests for marker classification."""

    def test_known_markers(self):
        text = "\n".join(
            f'Ref: "A"."a" {marker} "B"."b"' for marker in ("-", "<", ">", "<>")
        )
        assert unknown_direction_relations(parse_dbml(text)) == []

    def test_unknown_marker(self):
        schema = parse_dbml('Ref: "A"."a" >> "B"."b"\nRef: "A"."a" > "B"."b"')
        assert unknown_direction_relations(schema) == [Relation("A", "a", ">>", "B", "b")]


class TestDescribeRelation:
    """Tests for relation formatting."""

    def test_describe(self):
        rel = Relation("posts", "user_id", ">", "users", "id")
        assert describe_relation(rel) == "posts.user_id > users.id"
