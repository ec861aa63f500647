"""Configuration management for the glance system."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_MAX_POSTS, DEFAULT_STALENESS_HOURS
from .types import Environment

TRUTHY_VALUES = ["true", "1", "yes", "on"]


class Settings(BaseModel):
    """Application settings."""

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="Glance API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # CORS Settings
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Whether to write logs to ./logs as well"
    )

    # Database Settings
    db_path: str | None = Field(
        default=None, description="SQLite file path overriding the environment default"
    )

    # Twitter Settings
    twitter_bearer_token: str = Field(
        default="", description="Twitter API v2 bearer token"
    )
    twitter_api_base_url: str = Field(
        default="https://api.twitter.com/2", description="Twitter API base URL"
    )

    # LLM Settings
    llm_api_key: str = Field(
        default="", description="LLM API key from environment variable"
    )
    llm_model: str = Field(
        default="gpt-4o-mini", description="LLM model to use for summarization"
    )
    llm_api_base_url: str = Field(
        default="https://api.openai.com/v1", description="LLM API base URL"
    )

    # Network Settings
    http_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for external HTTP calls"
    )

    # Summary Cache Settings
    staleness_hours: float = Field(
        default=DEFAULT_STALENESS_HOURS,
        gt=0,
        description="Hours after which a cached summary is refreshed",
    )
    max_posts: int = Field(
        default=DEFAULT_MAX_POSTS,
        ge=1,
        le=100,
        description="Maximum number of recent posts to summarize",
    )
    single_flight: bool = Field(
        default=False,
        description="Share one upstream refresh between concurrent requests "
        "for the same handle",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        # Never write log files from the test environment
        if self.environment == Environment.TESTING:
            self.log_to_file = False

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def twitter_configured(self) -> bool:
        """Whether a Twitter bearer token is available."""
        return bool(self.twitter_bearer_token)

    @property
    def openai_configured(self) -> bool:
        """Whether an OpenAI API key is available."""
        return bool(self.llm_api_key)


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    # Parse CORS origins from comma-separated string
    cors_origins_str = os.getenv("GLANCE_CORS_ORIGINS", "*")
    if cors_origins_str == "*":
        cors_origins = ["*"]
    else:
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    log_to_file = os.getenv("GLANCE_LOG_TO_FILE", "false").lower() in TRUTHY_VALUES
    single_flight = (
        os.getenv("GLANCE_SINGLE_FLIGHT", "false").lower() in TRUTHY_VALUES
    )

    return Settings(
        environment=Environment(os.getenv("GLANCE_ENV", "development")),
        api_title=os.getenv("GLANCE_API_TITLE", "Glance API"),
        api_version=os.getenv("GLANCE_API_VERSION", "1.0.0"),
        cors_allow_origins=cors_origins,
        log_level=os.getenv("GLANCE_LOG_LEVEL", "INFO").upper(),
        log_to_file=log_to_file,
        db_path=os.getenv("GLANCE_DB_PATH"),
        twitter_bearer_token=os.getenv("TWITTER_BEARER_TOKEN", ""),
        twitter_api_base_url=os.getenv(
            "GLANCE_TWITTER_API_BASE_URL", "https://api.twitter.com/2"
        ),
        llm_api_key=os.getenv("OPENAI_API_KEY", ""),
        llm_model=os.getenv("GLANCE_LLM_MODEL", "gpt-4o-mini"),
        llm_api_base_url=os.getenv(
            "GLANCE_LLM_API_BASE_URL", "https://api.openai.com/v1"
        ),
        http_timeout=float(os.getenv("GLANCE_HTTP_TIMEOUT", "30.0")),
        staleness_hours=float(
            os.getenv("GLANCE_STALENESS_HOURS", str(DEFAULT_STALENESS_HOURS))
        ),
        max_posts=int(os.getenv("GLANCE_MAX_POSTS", str(DEFAULT_MAX_POSTS))),
        single_flight=single_flight,
    )
