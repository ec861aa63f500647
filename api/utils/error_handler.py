"""Error handling utilities for API endpoints."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import HTTPException, status

from core.exceptions import (
    InvalidInputError,
    NotFoundError,
    UpstreamConfigError,
    UpstreamError,
    UpstreamRateLimitError,
)
from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
CONFIG_ERROR_MESSAGE = "API configuration error"


def to_http_exception(
    exc: Exception,
    error_message: str = "Operation failed",
    not_found_message: str | None = None,
) -> HTTPException:
    """Map a domain error to the HTTP error shown to clients.

    Messages of upstream and unexpected failures are logged, never returned.
    """
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=not_found_message or str(exc),
        )
    if isinstance(exc, UpstreamRateLimitError):
        logger.warning(f"{error_message}: {exc}")
        return HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=RATE_LIMIT_MESSAGE
        )
    if isinstance(exc, UpstreamConfigError):
        logger.error(f"{error_message}: {exc}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=CONFIG_ERROR_MESSAGE,
        )
    if isinstance(exc, UpstreamError):
        logger.error(f"{error_message}: {exc}")
    else:
        logger.error(f"{error_message}: {exc}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error_message
    )


def handle_api_operation(
    operation: Callable[[], T],
    error_message: str = "Operation failed",
    not_found_message: str | None = None,
) -> T:
    """Handle API operations with consistent error handling."""
    try:
        return operation()
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, error_message, not_found_message) from e


async def handle_async_api_operation(
    operation: Callable[[], Awaitable[T]],
    error_message: str = "Operation failed",
    not_found_message: str | None = None,
) -> T:
    """Handle async API operations with consistent error handling."""
    try:
        return await operation()
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, error_message, not_found_message) from e
