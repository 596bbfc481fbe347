"""Health check endpoints for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from charfinder.api.v1.dependencies import get_dataset_provider
from charfinder.domain.exceptions import DataUnavailableException
from charfinder.infrastructure.unicode_data.provider import DatasetProvider
from charfinder.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Dataset unavailable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    provider: Annotated[DatasetProvider, Depends(get_dataset_provider)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 with the entry count once the dataset loads; 503 otherwise.

    Triggers the load (and download, if the local copy is missing) when the
    dataset has not been loaded yet.
    """
    try:
        dataset = await provider.get()
    except DataUnavailableException as e:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    return ReadinessResponse(entries=len(dataset))
