"""Cache-or-fetch orchestration for handle summaries."""

import asyncio
from datetime import datetime
from typing import Any

from core import get_logger
from core.constants import (
    DEFAULT_MAX_POSTS,
    QUIET_ENGAGEMENT,
    QUIET_SENTIMENT,
    QUIET_SUMMARY,
    QUIET_TAG,
)
from core.exceptions import InvalidInputError
from core.models.domain.post import PostBundle
from core.models.domain.summary import SummaryResult
from core.services.cache_store import SummaryCacheStore
from core.services.summarization_service import PostSummarizationService
from core.sources.base import BasePostSource
from core.types import SummaryMode
from core.utils import normalize_handle

logger = get_logger(__name__)


class SummaryService:
    """Serve cached summaries and refresh them when stale or missing."""

    def __init__(
        self,
        cache_store: SummaryCacheStore,
        post_source: BasePostSource,
        summarizer: PostSummarizationService,
        max_posts: int = DEFAULT_MAX_POSTS,
        single_flight: bool = False,
    ) -> None:
        """Initialize summary service.

        Args:
            cache_store: Store holding summaries and their posts
            post_source: Source of recent posts for a handle
            summarizer: Language model summarization service
            max_posts: Maximum number of posts fetched per refresh
            single_flight: Share one refresh between concurrent callers
                asking for the same handle
        """
        self.cache_store = cache_store
        self.post_source = post_source
        self.summarizer = summarizer
        self.max_posts = max_posts
        self.single_flight = single_flight
        self._in_flight: dict[str, asyncio.Future[SummaryResult]] = {}

    async def get_or_refresh_summary(
        self,
        handle: str,
        mode: SummaryMode = SummaryMode.BRIEF,
        now: datetime | None = None,
    ) -> SummaryResult:
        """Return a fresh cached summary or build a new one.

        Args:
            handle: Free-form handle, optionally prefixed with "@"
            mode: Summarization flavor used when a refresh is needed
            now: Reference time for the staleness check

        Returns:
            Summary result, with ``cached`` set on a cache hit

        Raises:
            InvalidInputError: If the handle is empty after normalization
            NotFoundError: If the handle does not exist upstream
            UpstreamError: If fetching, summarizing or storing fails
        """
        key = normalize_handle(handle)
        if not key:
            raise InvalidInputError("Username is required")

        cached = self.cache_store.get(key)
        if cached is not None and not self.cache_store.is_stale(cached, now):
            logger.info(f"[@{key}] Cache hit, updated at {cached.updated_at}")
            return SummaryResult.from_row(cached, cached=True)

        logger.info(f"[@{key}] Cache {'stale' if cached else 'miss'}, refreshing")
        if not self.single_flight:
            return await self._refresh(key, mode)
        return await self._refresh_once(key, mode)

    async def _refresh_once(self, key: str, mode: SummaryMode) -> SummaryResult:
        future = self._in_flight.get(key)
        if future is not None:
            logger.debug(f"[@{key}] Joining in-flight refresh")
            return await asyncio.shield(future)

        future = asyncio.get_running_loop().create_future()
        self._in_flight[key] = future
        try:
            result = await self._refresh(key, mode)
        except BaseException as e:
            # Release joiners even when the leader is cancelled
            if isinstance(e, asyncio.CancelledError):
                future.cancel()
            else:
                future.set_exception(e)
                # Retrieve so an unawaited failure is not reported by the loop
                future.exception()
            raise
        else:
            future.set_result(result)
            return result
        finally:
            self._in_flight.pop(key, None)

    async def _refresh(self, key: str, mode: SummaryMode) -> SummaryResult:
        bundle = await self.post_source.fetch_posts_for_summary(key, self.max_posts)
        logger.info(f"[@{key}] Fetched {len(bundle.posts)} posts")

        if not bundle.posts:
            fields = self._quiet_fields(bundle, mode)
        elif mode == SummaryMode.DETAILED:
            fields = await self._detailed_fields(key, bundle)
        else:
            fields = await self._brief_fields(key, bundle)

        row = self.cache_store.store_summary(key, fields, bundle.posts)
        return SummaryResult.from_row(row, cached=False)

    @staticmethod
    def _quiet_fields(bundle: PostBundle, mode: SummaryMode) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "display_name": bundle.author.display_name,
            "summary": QUIET_SUMMARY,
            "tags": [QUIET_TAG],
            "post_count": 0,
            "mode": mode,
            "topics": None,
            "sentiment": None,
            "engagement": None,
        }
        if mode == SummaryMode.DETAILED:
            fields.update(
                topics=[QUIET_TAG],
                sentiment=QUIET_SENTIMENT,
                engagement=QUIET_ENGAGEMENT,
            )
        # The placeholder stands in for the model answer
        fields["raw_response"] = {
            key: fields[key]
            for key in ("summary", "tags", "topics", "sentiment", "engagement")
            if fields[key] is not None
        }
        return fields

    async def _brief_fields(self, key: str, bundle: PostBundle) -> dict[str, Any]:
        brief = await self.summarizer.summarize_brief(
            bundle.texts, key, bundle.author.display_name
        )
        return {
            "display_name": bundle.author.display_name,
            "summary": brief.summary,
            "tags": brief.tags,
            "raw_response": brief.raw_response,
            "post_count": len(bundle.posts),
            "mode": SummaryMode.BRIEF,
            "topics": None,
            "sentiment": None,
            "engagement": None,
        }

    async def _detailed_fields(self, key: str, bundle: PostBundle) -> dict[str, Any]:
        detailed = await self.summarizer.summarize_detailed(
            bundle.texts, key, bundle.author.display_name
        )
        return {
            "display_name": bundle.author.display_name,
            "summary": detailed.summary,
            "tags": detailed.topics,
            "raw_response": detailed.raw_response,
            "post_count": len(bundle.posts),
            "mode": SummaryMode.DETAILED,
            "topics": detailed.topics,
            "sentiment": detailed.sentiment,
            "engagement": detailed.engagement,
        }
