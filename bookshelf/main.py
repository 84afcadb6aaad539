"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Settings and the database engine can be passed in, so tests build
     an app against their own engine

2. Lifespan Events
   - startup: optionally create missing tables
   - shutdown: dispose of the engine the factory created

3. Exception Handlers
   - Every error response uses the same body:
     {"error": {"message": ..., "status": ...}, "message": ...}
   - Request validation errors become 400 with a list of violations
   - Database and unexpected errors become 500 and are logged
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.config import Settings, get_settings
from bookshelf.database import create_db_engine, create_session_factory, create_tables
from bookshelf.errors import (
    APIError,
    SchemaValidationError,
    error_response,
    format_validation_errors,
)
from bookshelf.routers import books_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    app_settings: Settings = app.state.settings
    engine: Engine = app.state.engine

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Debug mode: {app_settings.debug}")

    if app_settings.db_create_tables:
        create_tables(engine)
        logger.info("Database tables created")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {app_settings.app_name}...")

    if app.state.owns_engine:
        engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        engine: Database engine to use (defaults to one built from settings).
            An engine passed in is owned by the caller and not disposed on
            shutdown.

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    owns_engine = engine is None
    if engine is None:
        engine = create_db_engine(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookshelf API

A RESTful API for managing a store's books.

### Features
- **Books**: Full CRUD operations, keyed by isbn

### Errors
Every error response has the shape
`{"error": {"message": ..., "status": ...}, "message": ...}`.
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The database handle lives on the app, get_db() reads it per request
    app.state.settings = settings
    app.state.engine = engine
    app.state.owns_engine = owns_engine
    app.state.session_factory = create_session_factory(engine)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Render NotFoundError, SchemaValidationError and friends."""
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        FastAPI raises RequestValidationError when the body doesn't match
        the schema. The pydantic errors are translated to violation strings
        and returned as a 400.
        """
        error = SchemaValidationError(format_validation_errors(exc.errors()))
        logger.debug(f"Rejected {request.method} {request.url.path}: {error.messages}")
        return error_response(error.message, error.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unknown routes (404) and unsupported methods (405)."""
        response = error_response(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return error_response(
            "A database error occurred. Please try again later.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the exception text is returned to the client.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        message = str(exc) if settings.debug else "An internal error occurred."
        return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check() -> JSONResponse:
        """
        Health check endpoint.

        Returns 200 when the database answers a trivial query, 503 otherwise.
        """
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            connected = True
        except SQLAlchemyError as exc:
            logger.warning(f"Health check failed: {exc}")
            connected = False

        return JSONResponse(
            status_code=status.HTTP_200_OK if connected else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "healthy" if connected else "unhealthy",
                "app": settings.app_name,
                "version": settings.api_version,
                "database": {"connected": connected},
            },
        )

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookshelf.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
