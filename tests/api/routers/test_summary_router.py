"""Tests for summary router."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from core.exceptions import (
    InvalidInputError,
    NotFoundError,
    StorageError,
    UpstreamConfigError,
    UpstreamError,
    UpstreamRateLimitError,
)
from core.models.domain.summary import SummaryResult
from core.types import SummaryMode


def make_result(**overrides: object) -> SummaryResult:
    data: dict[str, object] = {
        "handle": "alice",
        "display_name": "Alice Example",
        "summary": "Busy building things.",
        "tags": ["a", "b", "c"],
        "post_count": 3,
        "cached": False,
        "updated_at": "2024-05-03T10:00:00+00:00",
    }
    data.update(overrides)
    return SummaryResult.model_validate(data)


class TestSummaryRouter:
    """Test summary router endpoints."""

    def test_get_summary_success(
        self, client: TestClient, mock_summary_service: MagicMock
    ) -> None:
        """Test successful summary retrieval."""
        mock_summary_service.get_or_refresh_summary.return_value = make_result()

        response = client.get("/summary", params={"handle": "@alice"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["summary"] == "Busy building things."
        assert body["data"]["tags"] == ["a", "b", "c"]
        assert body["data"]["handle"] == "alice"
        assert body["data"]["display_name"] == "Alice Example"
        assert body["data"]["post_count"] == 3
        assert body["data"]["cached"] is False

        mock_summary_service.get_or_refresh_summary.assert_awaited_once_with(
            "@alice", SummaryMode.BRIEF
        )

    def test_get_summary_detailed(
        self, client: TestClient, mock_summary_service: MagicMock
    ) -> None:
        """Test detailed summary retrieval."""
        mock_summary_service.get_or_refresh_summary.return_value = make_result(
            mode=SummaryMode.DETAILED,
            topics=["Design"],
            sentiment="positive",
            engagement="high",
        )

        response = client.get("/summary?handle=alice&detailed=true")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["topics"] == ["Design"]
        assert data["sentiment"] == "positive"
        assert data["engagement"] == "high"
        mock_summary_service.get_or_refresh_summary.assert_awaited_once_with(
            "alice", SummaryMode.DETAILED
        )

    def test_get_summary_missing_handle(
        self, client: TestClient, mock_summary_service: MagicMock
    ) -> None:
        """Test empty handle maps to 400."""
        mock_summary_service.get_or_refresh_summary.side_effect = InvalidInputError(
            "Username is required"
        )

        response = client.get("/summary")

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Username is required"}

    @pytest.mark.parametrize(
        "error, status_code, message",
        [
            (NotFoundError("User @ghost not found"), 404, "User not found"),
            (
                UpstreamRateLimitError("Twitter API rate limit exceeded"),
                429,
                "Rate limit exceeded. Please try again later.",
            ),
            (
                UpstreamConfigError("TWITTER_BEARER_TOKEN is not set"),
                500,
                "API configuration error",
            ),
            (UpstreamError("socket closed"), 500, "Failed to generate summary"),
            (StorageError("disk full"), 500, "Failed to generate summary"),
        ],
    )
    def test_get_summary_error_mapping(
        self,
        client: TestClient,
        mock_summary_service: MagicMock,
        error: Exception,
        status_code: int,
        message: str,
    ) -> None:
        """Test domain errors map to status codes without internal details."""
        mock_summary_service.get_or_refresh_summary.side_effect = error

        response = client.get("/summary", params={"handle": "ghost"})

        assert response.status_code == status_code
        assert response.json() == {"success": False, "error": message}

    def test_get_summary_invalid_detailed_flag(self, client: TestClient) -> None:
        """Test malformed query parameters map to 400."""
        response = client.get("/summary?handle=alice&detailed=maybe")

        assert response.status_code == 400
        assert response.json()["success"] is False
