# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the People API.
# It configures the FastAPI application with routers and error handlers.
#
# Usage:
#   uvicorn app.main:app --port 8080
#   python scripts/start_server.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings
from app.exceptions import (
    application_exception_handler,
    http_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import people
from lib.person_store import PersonStore, connect_store
from lib.utils import ApplicationError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _build_lifespan(config: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: connect to MongoDB unless a store was injected
        - Shutdown: close the connection this lifespan opened
        """
        client = None

        # Startup
        if app.state.person_store is None:
            # StoreError here aborts startup and uvicorn exits
            client, app.state.person_store = connect_store(
                config.MONGODB_URI,
                ping_timeout_s=config.MONGODB_PING_TIMEOUT_S,
            )
        logger.info(f"Server started in {config.ENVIRONMENT} mode")

        yield

        # Shutdown
        logger.info("Shutting down People API")
        if client is not None:
            client.close()
            app.state.person_store = None
            logger.info("Disconnected from MongoDB")

    return lifespan


def create_app(
    store: PersonStore | None = None,
    strict_errors: bool | None = None,
    config: Settings = settings,
) -> FastAPI:
    """
    Build a People API application.

    Args:
        store: PersonStore to serve from. When omitted the app connects to
            MongoDB at startup using config.MONGODB_URI.
        strict_errors: Override config.STRICT_ERRORS
        config: Settings to read connection and error-mode values from

    Returns:
        FastAPI: The configured application
    """
    application = FastAPI(
        title="People API",
        description="CRUD over a single MongoDB collection of person records.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=_build_lifespan(config),
        openapi_tags=[
            {
                "name": "People",
                "description": "Create, read, update and delete person records",
            },
        ],
    )

    application.state.person_store = store
    application.state.strict_errors = (
        config.STRICT_ERRORS if strict_errors is None else strict_errors
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    application.add_exception_handler(ApplicationError, application_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    application.include_router(
        people.router,
        prefix="/people",
        tags=["People"]
    )

    return application


# Create FastAPI application
app = create_app()
