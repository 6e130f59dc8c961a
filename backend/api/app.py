"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.auth_client import get_auth_client_registry
from shared.config import get_settings
from shared.exceptions import CuratorError
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health, users
from modules.admin.routes import router as admin_router
from modules.artworks.routes import router as artworks_router
from modules.search.routes import router as search_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the single auth client and locks it so nothing can replace it
    while the process runs.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s on %s:%s (%s)", settings.app_name, settings.host, settings.port, settings.environment)

    registry = get_auth_client_registry()
    if settings.supabase_url and settings.supabase_anon_key:
        registry.lock()
        logger.info("Auth client ready (storage key %s)", registry.storage_key)
    else:
        logger.warning("SUPABASE_URL or SUPABASE_ANON_KEY not set, auth client not created")

    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def curator_error_handler(request: Request, exc: CuratorError) -> JSONResponse:
    """Render any CuratorError with its own status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or incomplete bodies are client errors: 400, not 422."""
    missing = [
        ".".join(str(part) for part in err["loc"] if part != "body")
        for err in exc.errors()
        if err.get("type") == "missing"
    ]
    body = ValidationErrorResponse(
        message="Missing required fields" if missing else "Invalid request",
        details={"errors": jsonable_encoder(exc.errors()), "missing": missing},
    )
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Artwork marketplace API: listings, search and admin curation",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(CuratorError, curator_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(artworks_router, prefix="/api", tags=["artworks"])
    app.include_router(search_router, prefix="/api", tags=["search"])
    app.include_router(admin_router, prefix="/api/admin", tags=["admin"])

    return app


# Application instance for uvicorn
app = create_app()
