"""Twitter API v2 post source."""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from core.constants import (
    EXCLUDED_REFERENCE_TYPES,
    MIN_POST_LENGTH,
    TWITTER_MAX_RESULTS,
    TWITTER_MIN_RESULTS,
)
from core.exceptions import (
    UpstreamConfigError,
    UpstreamError,
    UpstreamRateLimitError,
)
from core.log import get_logger
from core.models.domain.post import AuthorInfo, SourcePostData
from core.models.external.twitter import (
    Tweet,
    TwitterTimelineResponse,
    TwitterUserResponse,
)
from core.utils import clean_post_text, parse_datetime

from .base import BasePostSource

logger = get_logger(__name__)


class TwitterPostSource(BasePostSource):
    """Fetch recent original tweets through the Twitter API v2."""

    def __init__(
        self,
        bearer_token: str,
        api_base_url: str = "https://api.twitter.com/2",
        timeout: float = 30.0,
    ) -> None:
        """Initialize Twitter post source.

        Args:
            bearer_token: App-only bearer token, may be empty when unconfigured
            api_base_url: Base URL of the Twitter API v2
            timeout: Request timeout in seconds
        """
        self._bearer_token = bearer_token
        self.api_base_url = api_base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout)

        logger.info(
            f"Initialized {self.__class__.__name__} with {api_base_url=}, "
            f"configured={self.is_configured}"
        )

    @property
    def is_configured(self) -> bool:
        """Whether a bearer token is available."""
        return bool(self._bearer_token)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_author(self, handle: str) -> AuthorInfo | None:
        url = f"{self.api_base_url}/users/by/username/{quote(handle, safe='')}"
        response = await self._get(
            url,
            params={"user.fields": "id,username,name,public_metrics"},
            not_found_ok=True,
        )
        if response is None:
            return None

        try:
            payload = TwitterUserResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(f"Malformed Twitter user response: {e}") from e

        if payload.data is None:
            logger.info(f"Twitter user @{handle} not found: {payload.errors}")
            return None

        return AuthorInfo(
            author_id=payload.data.id,
            handle=payload.data.username,
            display_name=payload.data.name,
        )

    async def get_recent_posts(
        self, author_id: str, limit: int
    ) -> list[SourcePostData]:
        tweets = await self.get_raw_posts(author_id, limit)
        return self.clean_posts(tweets)

    async def get_raw_posts(self, author_id: str, limit: int) -> list[Tweet]:
        """Fetch the author's recent tweets without cleaning.

        Args:
            author_id: Twitter user ID
            limit: Number of tweets to request, clamped to the API range

        Returns:
            Raw tweets, newest first
        """
        max_results = max(TWITTER_MIN_RESULTS, min(limit, TWITTER_MAX_RESULTS))
        url = f"{self.api_base_url}/users/{quote(author_id, safe='')}/tweets"
        response = await self._get(
            url,
            params={
                "max_results": max_results,
                "tweet.fields": "created_at,public_metrics,referenced_tweets",
                "expansions": "author_id",
                "exclude": "retweets,replies",
            },
        )
        if response is None:
            raise UpstreamError(f"Twitter user {author_id} has no timeline")

        try:
            payload = TwitterTimelineResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(f"Malformed Twitter timeline response: {e}") from e

        return payload.data

    def clean_posts(self, tweets: list[Tweet]) -> list[SourcePostData]:
        """Drop retweets, replies and short tweets; strip links from the rest."""
        posts: list[SourcePostData] = []
        for tweet in tweets:
            if self._is_repost_or_reply(tweet):
                continue

            text = clean_post_text(tweet.text)
            if len(text) < MIN_POST_LENGTH:
                continue

            posted_at = parse_datetime(tweet.created_at)
            posts.append(
                SourcePostData(
                    post_id=tweet.id,
                    text=text,
                    posted_at=posted_at.isoformat() if posted_at else tweet.created_at,
                    like_count=tweet.public_metrics.like_count,
                    repost_count=tweet.public_metrics.retweet_count,
                )
            )
        return posts

    @staticmethod
    def _is_repost_or_reply(tweet: Tweet) -> bool:
        return any(
            ref.type in EXCLUDED_REFERENCE_TYPES
            for ref in tweet.referenced_tweets or []
        )

    async def _get(
        self,
        url: str,
        params: dict[str, Any],
        not_found_ok: bool = False,
    ) -> httpx.Response | None:
        """Perform an authenticated GET and map failures to domain errors.

        Returns:
            The response, or None on 404 when ``not_found_ok`` is set
        """
        if not self.is_configured:
            raise UpstreamConfigError(
                "Twitter API configuration error: TWITTER_BEARER_TOKEN is not set"
            )

        headers = {
            "Authorization": f"Bearer {self._bearer_token}",
            "Content-Type": "application/json",
        }
        try:
            response = await self._client.get(url, params=params, headers=headers)
        except httpx.RequestError as e:
            raise UpstreamError(f"Network error calling Twitter API: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND and not_found_ok:
            return None
        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise UpstreamRateLimitError("Twitter API rate limit exceeded")
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise UpstreamConfigError("Twitter API rejected the bearer token")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"HTTP error from Twitter API: {e}") from e

        return response
