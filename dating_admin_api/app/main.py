"""
Main entrypoint for the Dating Admin API.

This module assembles the FastAPI application: logging, the
repository store, the API call recorder and the versioned routers.
``create_app`` builds and configures an app around a store, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn dating_admin_api.app.main:app --reload

Tests call ``create_app(store=...)`` to get an application bound to a
store of their own.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import StoreError
from .core.logging_config import setup_logging
from .core.seed import build_store
from .core.store import MemStore
from .middleware import ApiCallRecorderMiddleware


logger = logging.getLogger(__name__)


def create_app(store: Optional[MemStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MemStore]
        Store to serve.  When omitted a new one is built from
        ``settings`` (administrator plus sample data).
    settings : Optional[Settings]
        Configuration; defaults to the environment-derived settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before building the store so seeding is logged.
    setup_logging(settings.log_level, settings.log_file or None, use_json=settings.log_json)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else build_store(settings)
    app.state.settings = settings

    app.add_middleware(ApiCallRecorderMiddleware, header_name=settings.api_key_header)

    # The dashboard calls /api/...; versioned clients use /api/v1/....
    # Both prefixes expose identical endpoints.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal store error"})

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
