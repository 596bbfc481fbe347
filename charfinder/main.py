"""FastAPI application entry point.

Wiring only: logging, dataset provider, exception handlers, middleware,
routers. No business logic here. See charfinder.core.lifespan and
charfinder.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app(). Tests may also
pass their own dataset provider.

Run with: uvicorn charfinder.main:app
"""

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from charfinder.api.v1 import api_router
from charfinder.api.v1.endpoints import search
from charfinder.application.use_cases.search import SearchService
from charfinder.core.config import get_settings
from charfinder.core.exception_handlers import register_exception_handlers
from charfinder.core.lifespan import create_lifespan
from charfinder.infrastructure.unicode_data import DatasetProvider, DatasetProviderFactory
from charfinder.middleware import RequestIDMiddleware
from charfinder.shared.telemetry import setup_logging


def create_app(dataset_provider: DatasetProvider | None = None) -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    if dataset_provider is None:
        app.state.http_client = httpx.AsyncClient(timeout=settings.download_timeout_seconds)
        dataset_provider = DatasetProviderFactory.create_provider(
            settings, app.state.http_client
        )
    else:
        app.state.http_client = None
    app.state.dataset_provider = dataset_provider
    app.state.search_service = SearchService(
        dataset_provider, param_name=settings.query_param_name
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost (request ID wraps CORS).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")
    # Bare "/?query=..." kept as an alias of the search endpoint.
    app.add_api_route("/", search.search, methods=["GET"], include_in_schema=False)

    return app


app = create_app()
