"""Presentation-layer dependency injection.

The app factory builds the dataset provider and search service once and
stores them on app.state; routes receive them through these Depends()
helpers, never by constructing infrastructure themselves.
"""

from __future__ import annotations

from fastapi import Request

from charfinder.application.use_cases.search import SearchService
from charfinder.infrastructure.unicode_data.provider import DatasetProvider


def get_search_service(request: Request) -> SearchService:
    """Search use case bound to the app's shared dataset provider."""
    return request.app.state.search_service


def get_dataset_provider(request: Request) -> DatasetProvider:
    return request.app.state.dataset_provider


def query_params_multimap(request: Request) -> dict[str, list[str]]:
    """All query parameters as name -> ordered values (repeated keys kept)."""
    params = request.query_params
    return {name: params.getlist(name) for name in params.keys()}
