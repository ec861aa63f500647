"""Application service initializer for managing startup and shutdown."""

from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from core.config import Settings
from core.database.engine import create_database_engine, create_database_tables
from core.llm.openai_client import UnifiedOpenAIClient
from core.log import get_logger
from core.services.cache_store import SummaryCacheStore
from core.services.followup_service import FollowUpService
from core.services.summarization_service import PostSummarizationService
from core.services.summary_service import SummaryService
from core.sources.twitter import TwitterPostSource

logger = get_logger(__name__)


class AppServiceInitializer:
    """Manages initialization and lifecycle of application services."""

    def __init__(self, settings: Settings):
        """Initialize with application settings."""
        self.settings = settings
        self.engine: Engine | None = None
        self.cache_store: SummaryCacheStore | None = None
        self.post_source: TwitterPostSource | None = None
        self.openai_client: UnifiedOpenAIClient | None = None
        self.summarizer: PostSummarizationService | None = None
        self.summary_service: SummaryService | None = None
        self.followup_service: FollowUpService | None = None

    async def initialize_all_services(
        self,
        app: FastAPI,
        engine: Engine | None = None,
        twitter_base_url: str | None = None,
        twitter_bearer_token: str | None = None,
        llm_base_url: str | None = None,
        llm_api_key: str | None = None,
    ) -> None:
        """Initialize all services and configure app.state."""
        logger.info("Initializing all application services...")

        await self.initialize_database(engine)
        await self.initialize_source_services(twitter_base_url, twitter_bearer_token)
        await self.initialize_llm_services(llm_base_url, llm_api_key)
        await self.initialize_summary_services()
        self._setup_app_state(app)

        logger.info("All application services initialized successfully")

    async def initialize_database(self, engine: Engine | None = None) -> None:
        """Initialize database engine, tables and the cache store."""
        logger.info("Initializing database...")

        if engine:
            self.engine = engine
        else:
            db_path = Path(self.settings.db_path) if self.settings.db_path else None
            self.engine = create_database_engine(
                self.settings.environment, db_path=db_path
            )

        create_database_tables(self.engine)
        self.cache_store = SummaryCacheStore(
            self.engine,
            staleness_window=timedelta(hours=self.settings.staleness_hours),
        )

        logger.info("Database initialized successfully")

    async def initialize_source_services(
        self,
        twitter_base_url: str | None = None,
        twitter_bearer_token: str | None = None,
    ) -> None:
        """Initialize the Twitter post source."""
        bearer_token = twitter_bearer_token or self.settings.twitter_bearer_token
        if not bearer_token:
            logger.warning("TWITTER_BEARER_TOKEN is not set.")

        self.post_source = TwitterPostSource(
            bearer_token=bearer_token,
            api_base_url=twitter_base_url or self.settings.twitter_api_base_url,
            timeout=self.settings.http_timeout,
        )

    async def initialize_llm_services(
        self, llm_base_url: str | None = None, llm_api_key: str | None = None
    ) -> None:
        """Initialize LLM-related services."""
        api_key = llm_api_key or self.settings.llm_api_key
        if not api_key:
            logger.warning("OPENAI_API_KEY is not set.")

        self.openai_client = UnifiedOpenAIClient(
            api_key=api_key,
            base_url=llm_base_url or self.settings.llm_api_base_url,
            timeout=self.settings.http_timeout,
            model=self.settings.llm_model,
        )
        self.summarizer = PostSummarizationService(self.openai_client)

    async def initialize_summary_services(self) -> None:
        """Initialize the summary orchestrator and follow-up answerer."""
        if not self.cache_store:
            raise RuntimeError("Database must be initialized before summary services")
        if not self.post_source or not self.summarizer:
            raise RuntimeError(
                "Source and LLM services must be initialized before summary services"
            )

        self.summary_service = SummaryService(
            cache_store=self.cache_store,
            post_source=self.post_source,
            summarizer=self.summarizer,
            max_posts=self.settings.max_posts,
            single_flight=self.settings.single_flight,
        )
        self.followup_service = FollowUpService(
            cache_store=self.cache_store,
            summarizer=self.summarizer,
        )

    async def shutdown(self) -> None:
        """Close network clients held by the services."""
        logger.info("Closing application services...")

        if self.post_source:
            await self.post_source.close()
        if self.openai_client:
            await self.openai_client.close()

        logger.info("All application services closed successfully")

    def _setup_app_state(self, app: FastAPI) -> None:
        """Configure app.state with initialized services."""
        app.state.settings = self.settings
        app.state.engine = self.engine
        app.state.cache_store = self.cache_store
        app.state.post_source = self.post_source
        app.state.openai_client = self.openai_client
        app.state.summary_service = self.summary_service
        app.state.followup_service = self.followup_service
