"""
API route handlers for the DBML parser service.

Provides the /parse endpoint and health checks.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.models import HealthResponse, ParseRequest, ParseResponse
from schema.parser import InputTooLargeError

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=VERSION)


@router.post("/parse", response_model=ParseResponse)
async def parse(request: ParseRequest) -> ParseResponse:
    """
    Parse DBML text into tables and relations.

    Malformed text never fails the request; it yields a smaller model.
    """
    from orchestrator import run_pipeline_async

    logger.info(f"Received parse request: {len(request.text)} characters")

    try:
        response = await run_pipeline_async(request.text)
    except InputTooLargeError as e:
        logger.warning(f"Rejected parse request: {e}")
        raise HTTPException(status_code=413, detail=str(e)) from e

    logger.info(
        f"Parse completed: {len(response.tables)} tables, {len(response.relations)} relations"
    )
    return response


@router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "name": "dbml-schema-parser",
        "version": VERSION,
        "description": "Parses DBML-like schema text into tables and relations",
        "docs": "/docs",
    }
