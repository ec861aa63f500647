"""Global pytest configuration and fixtures."""

import json
import re
from collections.abc import AsyncGenerator, Generator
from datetime import timedelta
from logging import Logger
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from pytest_httpserver import HTTPServer
from sqlalchemy.engine import Engine
from sqlmodel import Session
from werkzeug.wrappers import Request, Response

from core import setup_test_logging
from core.constants import BRIEF_MAX_TOKENS, DETAILED_MAX_TOKENS
from core.database.engine import create_database_engine, create_database_tables
from core.database.repository import SourcePostRepository, SummaryRepository
from core.llm.openai_client import UnifiedOpenAIClient
from core.services.cache_store import SummaryCacheStore
from core.services.summarization_service import PostSummarizationService
from core.sources.twitter import TwitterPostSource
from core.types import Environment

from tests.utils.fakes import FakePostSource, FakeSummarizer

ASSETS_DIR = Path(__file__).parent / "assets"
TEST_BEARER_TOKEN = "test-bearer-token"
TEST_OPENAI_KEY = "test-api-key"


def load_asset(name: str) -> dict[str, Any]:
    with open(ASSETS_DIR / name, "r") as f:
        data: dict[str, Any] = json.load(f)
    return data


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest.fixture
def openai_responses() -> dict[str, Any]:
    """Canned OpenAI chat completion payloads."""
    return load_asset("openai_responses.json")


@pytest.fixture
def twitter_responses() -> dict[str, Any]:
    """Canned Twitter API v2 payloads."""
    return load_asset("twitter_responses.json")


@pytest.fixture
def mock_openai_server(
    httpserver: HTTPServer, openai_responses: dict[str, Any]
) -> HTTPServer:
    """Set up mock OpenAI server answering by requested output length."""

    def chat_completion_handler(request: Request) -> Response:
        """Pick the canned completion matching the request's max_tokens."""
        body = json.loads(request.data.decode("utf-8"))
        max_tokens = body.get("max_tokens")
        if max_tokens == BRIEF_MAX_TOKENS:
            response_data = openai_responses["brief_response"]
        elif max_tokens == DETAILED_MAX_TOKENS:
            response_data = openai_responses["detailed_response"]
        else:
            response_data = openai_responses["chat_response"]

        return Response(
            json.dumps(response_data),
            status=200,
            headers={"Content-Type": "application/json"},
        )

    httpserver.expect_request(
        "/v1/chat/completions",
        method="POST",
    ).respond_with_handler(chat_completion_handler)

    return httpserver


@pytest.fixture
def mock_twitter_server(
    httpserver: HTTPServer, twitter_responses: dict[str, Any]
) -> HTTPServer:
    """Set up mock Twitter API v2 server for user lookup and timelines."""

    def json_response(data: Any, status: int = 200) -> Response:
        return Response(
            json.dumps(data),
            status=status,
            headers={"Content-Type": "application/json"},
        )

    def is_authorized(request: Request) -> bool:
        return request.headers.get("Authorization") == f"Bearer {TEST_BEARER_TOKEN}"

    def user_handler(request: Request) -> Response:
        if not is_authorized(request):
            return json_response({"title": "Unauthorized"}, status=401)

        username = request.path.rsplit("/", 1)[-1].lower()
        if username == "ratelimited":
            return json_response({"title": "Too Many Requests"}, status=429)
        if username == "broken":
            return json_response({"title": "Internal Error"}, status=500)
        if username in twitter_responses["users"]:
            return json_response(twitter_responses["users"][username])
        return json_response(twitter_responses["user_not_found"])

    def timeline_handler(request: Request) -> Response:
        if not is_authorized(request):
            return json_response({"title": "Unauthorized"}, status=401)

        user_id = request.path.split("/")[-2]
        timeline = twitter_responses["timelines"].get(
            user_id, {"meta": {"result_count": 0}}
        )
        return json_response(timeline)

    httpserver.expect_request(
        re.compile(r"^/2/users/by/username/[^/]+$"), method="GET"
    ).respond_with_handler(user_handler)
    httpserver.expect_request(
        re.compile(r"^/2/users/[^/]+/tweets$"), method="GET"
    ).respond_with_handler(timeline_handler)

    return httpserver


@pytest.fixture
def mock_db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Create a real database engine for testing using a file-based database."""
    engine = create_database_engine(Environment.TESTING, db_path=tmp_path / "test.db")
    create_database_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def mock_db_session(mock_db_engine: Engine) -> Generator[Session, None, None]:
    with Session(mock_db_engine) as session:
        yield session


@pytest.fixture
def summary_repo(mock_db_session: Session) -> SummaryRepository:
    """Create summary repository instance."""
    return SummaryRepository(mock_db_session)


@pytest.fixture
def source_post_repo(mock_db_session: Session) -> SourcePostRepository:
    """Create source post repository instance."""
    return SourcePostRepository(mock_db_session)


@pytest.fixture
def cache_store(mock_db_engine: Engine) -> SummaryCacheStore:
    """Create a cache store with the default 24 hour staleness window."""
    return SummaryCacheStore(mock_db_engine, staleness_window=timedelta(hours=24))


@pytest_asyncio.fixture
async def twitter_source(
    mock_twitter_server: HTTPServer,
) -> AsyncGenerator[TwitterPostSource, None]:
    """Provide a TwitterPostSource pointed at the mock server."""
    source = TwitterPostSource(
        bearer_token=TEST_BEARER_TOKEN,
        api_base_url=mock_twitter_server.url_for("/2"),
        timeout=5.0,
    )
    yield source
    await source.close()


@pytest.fixture(scope="function")
def mock_openai_client(mock_openai_server: HTTPServer) -> UnifiedOpenAIClient:
    """Provide a UnifiedOpenAIClient pointed at the mock server."""
    return UnifiedOpenAIClient(
        api_key=TEST_OPENAI_KEY,
        base_url=mock_openai_server.url_for("/v1"),
        timeout=5.0,
        model="super-ai-model",
    )


@pytest.fixture
def summarizer(mock_openai_client: UnifiedOpenAIClient) -> PostSummarizationService:
    """Provide a summarization service backed by the mock OpenAI server."""
    return PostSummarizationService(mock_openai_client)


@pytest.fixture
def fake_source() -> FakePostSource:
    """In-memory post source that counts its calls."""
    return FakePostSource()


@pytest.fixture
def fake_summarizer() -> FakeSummarizer:
    """Summarizer stand-in that counts its calls."""
    return FakeSummarizer()
