"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only the dataset preload and the shared HTTP client close.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from charfinder.core.config import get_settings
from charfinder.domain.exceptions import DataUnavailableException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: preload the dataset when DATASET_PRELOAD is set. A failed
    preload is logged and left to the first request, which retries the load.
    Shutdown: close the shared HTTP client used for dataset downloads.
    """
    settings = get_settings()

    # ---- Startup ----
    provider = getattr(app.state, "dataset_provider", None)
    if settings.dataset_preload and provider is not None:
        try:
            dataset = await provider.get()
            logger.info("Dataset preloaded (%d entries)", len(dataset))
        except DataUnavailableException as e:
            logger.error("Dataset preload failed: %s", e.message)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")
