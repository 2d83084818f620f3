"""
Orchestrator for the DBML parsing pipeline.

Pipeline: Size check → Parser (tables + relations) → Relation resolution → Response

Fully synchronous implementation - the parser has no I/O.
"""

import logging

from api.models import ParseResponse
from config.settings import get_settings
from schema.models import Relation, SchemaModel
from schema.parser import check_input_size, parse_dbml
from validation.relation_checker import describe_relation, split_relations

logger = logging.getLogger(__name__)

EMPTY_SCHEMA_WARNING = "No tables found in the provided text."


# ============================================================================
# Pipeline Functions
# ============================================================================

def parse_schema_fn(text: str) -> SchemaModel:
    """Parse DBML text into the internal model."""
    return parse_dbml(text)


def resolve_relations_fn(schema: SchemaModel) -> list[Relation]:
    """Return relations that cannot be drawn because an endpoint is missing."""
    _, unresolved = split_relations(schema)
    return unresolved


def build_response_fn(schema: SchemaModel, unresolved: list[Relation]) -> ParseResponse:
    """Build the final ParseResponse."""
    warnings: list[str] = []
    if schema.is_empty:
        warnings.append(EMPTY_SCHEMA_WARNING)

    return ParseResponse.from_schema(schema, unresolved=unresolved, warnings=warnings)


# ============================================================================
# Main Pipeline Runner (Synchronous)
# ============================================================================

def run_pipeline(text: str) -> ParseResponse:
    """
    Run the parsing pipeline.

    Stages:
    1. Input size check (raises InputTooLargeError)
    2. Parse tables and relations
    3. Resolve relation endpoints against the tables
    4. Response Builder
    """
    settings = get_settings()

    # Stage 1: Bound the input
    logger.info("Stage 1: Checking input size")
    check_input_size(text, settings.max_input_chars)

    # Stage 2: Parse
    logger.info("Stage 2: Parsing DBML")
    schema = parse_schema_fn(text)
    logger.debug(f"Parser: tables={len(schema.tables)} relations={len(schema.relations)}")

    # Stage 3: Resolve endpoints
    logger.info("Stage 3: Resolving relation endpoints")
    unresolved = resolve_relations_fn(schema)
    logger.debug(f"Resolver: unresolved={len(unresolved)}")
    for relation in unresolved:
        logger.debug(f"Unresolved relation: {describe_relation(relation)}")

    # Stage 4: Build response
    logger.info("Stage 4: Building response")
    return build_response_fn(schema, unresolved)


async def run_pipeline_async(text: str) -> ParseResponse:
    """Async wrapper that just calls the sync pipeline."""
    return run_pipeline(text)
