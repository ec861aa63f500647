"""Fixtures for router tests with mocked services on app.state."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app import create_app
from core.config import Settings
from core.types import Environment


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with both integrations configured."""
    return Settings(
        environment=Environment.TESTING,
        twitter_bearer_token="test-bearer-token",
        llm_api_key="test-api-key",
    )


@pytest.fixture
def mock_summary_service() -> MagicMock:
    """Create mock summary orchestrator."""
    service = MagicMock()
    service.get_or_refresh_summary = AsyncMock()
    return service


@pytest.fixture
def mock_followup_service() -> MagicMock:
    """Create mock follow-up answerer."""
    service = MagicMock()
    service.answer_question = AsyncMock()
    return service


@pytest.fixture
def mock_post_source() -> MagicMock:
    """Create mock post source."""
    source = MagicMock()
    source.fetch_posts_for_summary = AsyncMock()
    return source


@pytest.fixture
def mock_cache_store() -> MagicMock:
    """Create mock cache store."""
    return MagicMock()


@pytest.fixture
def app(
    test_settings: Settings,
    mock_summary_service: MagicMock,
    mock_followup_service: MagicMock,
    mock_post_source: MagicMock,
    mock_cache_store: MagicMock,
) -> FastAPI:
    """Create an app whose services are mocks."""
    app = create_app()
    app.state.settings = test_settings
    app.state.summary_service = mock_summary_service
    app.state.followup_service = mock_followup_service
    app.state.post_source = mock_post_source
    app.state.cache_store = mock_cache_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
