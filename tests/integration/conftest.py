"""Common fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from fastapi.testclient import TestClient
from pytest_httpserver import HTTPServer
from sqlalchemy.engine import Engine

from api.app import create_app
from api.services.app_initializer import AppServiceInitializer
from core.config import Settings
from core.log import get_logger
from core.types import Environment

logger = get_logger(__name__)


@pytest_asyncio.fixture
async def integration_client(
    mock_db_engine: Engine,
    mock_twitter_server: HTTPServer,
    mock_openai_server: HTTPServer,
) -> AsyncGenerator[TestClient, None]:
    """Create a test client using AppServiceInitializer with mock dependencies."""
    settings = Settings(
        environment=Environment.TESTING,
        twitter_bearer_token="test-bearer-token",
        twitter_api_base_url=mock_twitter_server.url_for("/2"),
        llm_api_key="test-api-key",
        llm_api_base_url=mock_openai_server.url_for("/v1"),
        http_timeout=5.0,
    )

    app = create_app()
    app.state.settings = settings

    # Use AppServiceInitializer with mock dependencies
    initializer = AppServiceInitializer(settings)
    await initializer.initialize_all_services(app=app, engine=mock_db_engine)

    # Entering the client keeps one event loop for every request of a test
    with TestClient(app) as client:
        yield client
