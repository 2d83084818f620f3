"""API module for the DBML parser service."""

from api.models import (
    ColumnOut,
    HealthResponse,
    ParseRequest,
    ParseResponse,
    RelationOut,
)
from api.routes import router

__all__ = [
    "router",
    "ParseRequest",
    "ParseResponse",
    "ColumnOut",
    "RelationOut",
    "HealthResponse",
]
