"""
DBML parser for converting schema text to an internal SchemaModel.

This is a best-effort extraction using regex patterns. It recognizes table
blocks with typed columns, inline `[ref: ...]` references and standalone
`Ref:` statements. Fragments that do not match are skipped, never reported.
"""

import logging
import re

from schema.models import Column, Relation, SchemaModel, Table

logger = logging.getLogger(__name__)

# Identifiers are ASCII word characters only
TABLE_BLOCK_RE = re.compile(r"Table\s+(\w+)\s+\{([^}]*)\}", re.ASCII)

# col type [ref: > other_table.other_col]
INLINE_REF_RE = re.compile(r"(\w+)\s+\S+\s+\[ref:\s+([<>-]{1,2})\s*(\w+)\.(\w+)\]", re.ASCII)

# Ref: "table"."col" < "other_table"."other_col"
STANDALONE_REF_RE = re.compile(
    r'Ref:\s+"([^"\s]+)"\."([^"\s]+)"\s+([<>-]{1,2})\s+"([^"\s]+)"\."([^"\s]+)"'
)

PRIMARY_KEY_TOKEN = "[pk]"
PRIMARY_KEY_PHRASE = ("[primary", "key]")


class SchemaParseError(Exception):
    """Raised when schema text cannot be accepted for parsing."""

    pass


class InputTooLargeError(SchemaParseError):
    """Raised when schema text exceeds the configured size bound."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Schema text is {size} characters, limit is {limit}")
        self.size = size
        self.limit = limit


class RelationSet:
    """
    Insertion-ordered set of relations.

    Both reference notations feed the same instance, so a relation declared
    inline and again as a `Ref:` statement is kept once, at its first position.
    """

    def __init__(self) -> None:
        self._items: dict[Relation, None] = {}

    def add(self, relation: Relation) -> bool:
        """Add a relation; returns False if an identical one was already present."""
        if relation in self._items:
            return False
        self._items[relation] = None
        return True

    def __contains__(self, relation: object) -> bool:
        return relation in self._items

    def __len__(self) -> int:
        return len(self._items)

    def to_tuple(self) -> tuple[Relation, ...]:
        return tuple(self._items)


def is_primary_key(attributes: list[str]) -> bool:
    """
    Check whether a column's trailing attribute tokens mark it as a primary key.

    `[pk]` is matched per token. `[primary key]` spans two whitespace-separated
    tokens, so it is matched as two adjacent tokens.
    """
    lowered = [token.lower() for token in attributes]
    if PRIMARY_KEY_TOKEN in lowered:
        return True
    return any(pair == PRIMARY_KEY_PHRASE for pair in zip(lowered, lowered[1:]))


def parse_column(line: str) -> Column:
    """
    Parse one stripped, non-empty column line.

    Expected format:
        name type [attributes...]

    A line with a single token yields a column whose type is None.
    """
    tokens = line.split()
    name = tokens[0]
    col_type = tokens[1] if len(tokens) > 1 else None
    return Column(
        name=name,
        type=col_type,
        is_primary_key=is_primary_key(tokens[2:]),
    )


def parse_table(name: str, body: str) -> Table:
    """Build a Table from a block name and the text between its braces."""
    lines = [line.strip() for line in body.split("\n")]
    columns = [parse_column(line) for line in lines if line]
    return Table(name=name, columns=tuple(columns))


def extract_tables(text: str, relations: RelationSet | None = None) -> tuple[dict[str, Table], RelationSet]:
    """
    Extract table blocks and their inline references from DBML text.

    A later block with the same name replaces the earlier one entirely.
    Inline references are added to `relations` (a new set if not given)
    with the enclosing table as their source.

    Returns:
        Tuple of (table name -> Table, relation set)
    """
    if relations is None:
        relations = RelationSet()

    tables: dict[str, Table] = {}

    for match in TABLE_BLOCK_RE.finditer(text):
        table_name, body = match.group(1), match.group(2)
        if table_name in tables:
            logger.debug(f"Table '{table_name}' redefined, replacing earlier block")
        tables[table_name] = parse_table(table_name, body)

        for ref in INLINE_REF_RE.finditer(body):
            column, direction, to_table, to_column = ref.groups()
            relations.add(Relation(
                from_table=table_name,
                from_column=column,
                direction=direction,
                to_table=to_table,
                to_column=to_column,
            ))

    return tables, relations


def resolve_relations(text: str, relations: RelationSet | None = None) -> tuple[Relation, ...]:
    """
    Merge standalone `Ref:` statements into the collected relations.

    Relations already in `relations` (inline references) keep their
    positions; new standalone ones follow in document order. Markers are
    stored verbatim, even when they are not one of the four known ones.
    """
    if relations is None:
        relations = RelationSet()

    for match in STANDALONE_REF_RE.finditer(text):
        from_table, from_column, direction, to_table, to_column = match.groups()
        added = relations.add(Relation(
            from_table=from_table,
            from_column=from_column,
            direction=direction,
            to_table=to_table,
            to_column=to_column,
        ))
        if not added:
            logger.debug(f"Duplicate relation {from_table}.{from_column} {direction} {to_table}.{to_column}")

    return relations.to_tuple()


def parse_dbml(text: str | None) -> SchemaModel:
    """
    Parse DBML-like schema text into a SchemaModel.

    Example input:
        Table users {
          id int [pk]
          org_id int [ref: > orgs.id]
        }

        Ref: "posts"."user_id" > "users"."id"

    Never raises for malformed text; unrecognized fragments are simply
    absent from the result. Returns an empty SchemaModel for None or "".
    """
    if not text:
        return SchemaModel()

    tables, relations = extract_tables(text)
    ordered = resolve_relations(text, relations)

    logger.debug(f"Parsed {len(tables)} tables and {len(ordered)} relations")
    return SchemaModel(tables=tables, relations=ordered)


def check_input_size(text: str, limit: int) -> None:
    """Raise InputTooLargeError if `text` is longer than `limit` characters."""
    if limit > 0 and len(text) > limit:
        raise InputTooLargeError(size=len(text), limit=limit)
