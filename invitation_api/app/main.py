"""
Main entrypoint for the Invitation API.

This module assembles the FastAPI application: it sets up logging,
opens the MongoDB connection for the lifetime of the app, installs the
CORS policy and the error mapping, and includes the versioned routes.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn invitation_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import Database, connect_with_retry
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def create_app(
    config: Settings = settings,
    database_factory: Callable[[Settings], Database] = connect_with_retry,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Settings
        Application settings; defaults to the environment‑derived
        ``settings`` instance.
    database_factory : Callable[[Settings], Database]
        Builds the store handle at startup.  The default connects to
        ``config.mongo_uri`` with retries; tests pass a factory that
        returns an in‑memory database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup messages
    # are formatted consistently.
    setup_logging(config.log_level, config.log_file, config.log_level_overrides)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database = database_factory(config)
        try:
            yield
        finally:
            logger.info("Closing MongoDB connection")
            app.state.database.close()

    app = FastAPI(title=config.project_name, version=config.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_origin_regex=config.cors_origin_regex,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    register_exception_handlers(app)

    app.include_router(v1_router, prefix=config.api_prefix.rstrip("/"))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
