"""Tests for error handler utilities."""

import pytest
from fastapi import HTTPException

from api.utils.error_handler import (
    handle_api_operation,
    handle_async_api_operation,
    to_http_exception,
)
from core.exceptions import (
    InvalidInputError,
    NotFoundError,
    StorageError,
    UpstreamConfigError,
    UpstreamError,
    UpstreamRateLimitError,
)


def test_handle_api_operation_returns_success_result() -> None:
    """Test successful API operation returns expected result."""

    def success_operation() -> str:
        return "success"

    result = handle_api_operation(success_operation)
    assert result == "success"


def test_handle_api_operation_raises_400_for_invalid_input() -> None:
    """Test API operation raises HTTP 400 for InvalidInputError."""

    def invalid_operation() -> None:
        raise InvalidInputError("Username is required")

    with pytest.raises(HTTPException) as exc_info:
        handle_api_operation(invalid_operation)

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Username is required"


def test_handle_api_operation_uses_not_found_message() -> None:
    """Test API operation raises HTTP 404 with the given message."""

    def not_found_operation() -> None:
        raise NotFoundError("User @ghost not found")

    with pytest.raises(HTTPException) as exc_info:
        handle_api_operation(not_found_operation, not_found_message="User not found")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "User not found"


def test_handle_api_operation_keeps_not_found_detail_by_default() -> None:
    """Test NotFoundError detail is used when no message override is given."""

    def not_found_operation() -> None:
        raise NotFoundError("No data found for this user")

    with pytest.raises(HTTPException) as exc_info:
        handle_api_operation(not_found_operation)

    assert exc_info.value.detail == "No data found for this user"


def test_handle_api_operation_hides_unexpected_error() -> None:
    """Test API operation raises HTTP 500 without leaking the message."""

    def unexpected_error_operation() -> None:
        raise RuntimeError("secret stack detail")

    with pytest.raises(HTTPException) as exc_info:
        handle_api_operation(unexpected_error_operation, "Custom error message")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Custom error message"


def test_handle_api_operation_passes_http_exception_through() -> None:
    """Test HTTP exceptions raised by the operation are not rewrapped."""

    def http_error_operation() -> None:
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as exc_info:
        handle_api_operation(http_error_operation)

    assert exc_info.value.status_code == 418


@pytest.mark.parametrize(
    "error, status_code",
    [
        (InvalidInputError("x"), 400),
        (NotFoundError("x"), 404),
        (UpstreamRateLimitError("x"), 429),
        (UpstreamConfigError("x"), 500),
        (UpstreamError("x"), 500),
        (StorageError("x"), 500),
        (ValueError("x"), 500),
    ],
)
def test_to_http_exception_status_codes(error: Exception, status_code: int) -> None:
    """Test every domain error maps to its status code."""
    assert to_http_exception(error).status_code == status_code


@pytest.mark.asyncio
async def test_handle_async_api_operation_success() -> None:
    """Test successful async API operation."""

    async def success_operation() -> str:
        return "async success"

    result = await handle_async_api_operation(success_operation)
    assert result == "async success"


@pytest.mark.asyncio
async def test_handle_async_api_operation_rate_limited() -> None:
    """Test async API operation maps rate limiting to 429."""

    async def rate_limited_operation() -> None:
        raise UpstreamRateLimitError("OpenAI API rate limit exceeded")

    with pytest.raises(HTTPException) as exc_info:
        await handle_async_api_operation(rate_limited_operation)

    assert exc_info.value.status_code == 429
    assert "try again later" in exc_info.value.detail
