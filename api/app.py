"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers import (
    cache_router,
    chat_router,
    common_router,
    posts_router,
    summary_router,
)
from api.services.app_initializer import AppServiceInitializer
from core import get_logger, setup_logging
from core.config import Settings, load_settings
from core.models.api.responses import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = getattr(app.state, "settings", None) or load_settings()
    app.state.settings = settings
    setup_logging(
        level=settings.log_level,
        enable_file_logging=settings.log_to_file,
        is_test_env=settings.is_testing,
    )
    logger.info(f"Starting Glance API server in {settings.environment} mode")

    # Services wired ahead of startup (e.g. by tests) are left as they are
    initializer: AppServiceInitializer | None = None
    if getattr(app.state, "summary_service", None) is None:
        initializer = AppServiceInitializer(settings)
        await initializer.initialize_all_services(app)
        logger.info("Glance API server initialized successfully")

    yield

    if initializer is not None:
        await initializer.shutdown()
    logger.info("Glance API server shutting down")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors, routing errors included, as the error envelope."""
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 responses."""
    errors = exc.errors()
    logger.debug(f"Request validation failed for {request.url.path}: {errors}")
    message = "Invalid request"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()))
        message = f"Invalid request: {location} {errors[0].get('msg', '')}".strip()
    return _error_response(400, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return _error_response(500, "Internal server error")


def create_app() -> FastAPI:
    """Create FastAPI app with current settings."""
    settings = load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Summaries of what people have been posting lately",
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(common_router)
    app.include_router(summary_router)
    app.include_router(chat_router)
    app.include_router(posts_router)
    app.include_router(cache_router)
    return app


app = create_app()
