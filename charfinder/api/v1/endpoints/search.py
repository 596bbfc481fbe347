"""Search API: whole-word lookup of Unicode character names."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from charfinder.api.v1.dependencies import get_search_service, query_params_multimap
from charfinder.application.use_cases.search import SearchService
from charfinder.domain.exceptions import ResponseSerializationException
from charfinder.schemas.search import SearchResponse

router = APIRouter()


@router.get(
    "",
    response_model=SearchResponse,
    responses={
        400: {"description": "Invalid or empty query", "model": SearchResponse},
        500: {"description": "Dataset unavailable", "model": SearchResponse},
    },
)
async def search(
    params: Annotated[dict[str, list[str]], Depends(query_params_multimap)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
) -> JSONResponse:
    """Return characters whose names contain every `query` value as whole words.

    Repeat `query` to refine (`?query=DESKTOP&query=COMPUTER`). Matching
    ignores case and treats hyphens as spaces. Zero matches is still a 200.
    """
    outcome = await search_svc.search(params)
    try:
        body = SearchResponse.from_outcome(outcome).model_dump()
    except (ValidationError, TypeError) as e:
        raise ResponseSerializationException(str(e)) from e
    return JSONResponse(status_code=outcome.http_status, content=body)
