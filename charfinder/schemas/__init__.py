"""Pydantic response schemas for the API."""

from charfinder.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from charfinder.schemas.search import CharNameResponse, SearchResponse

__all__ = [
    "CharNameResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchResponse",
]
