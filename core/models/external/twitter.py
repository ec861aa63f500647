"""Twitter API v2 models for external service integration."""

from pydantic import BaseModel, Field


class TwitterUser(BaseModel):
    """User object from /2/users/by/username."""

    id: str
    username: str
    name: str | None = None


class TwitterPublicMetrics(BaseModel):
    """Engagement counters attached to a tweet."""

    retweet_count: int = 0
    like_count: int = 0
    reply_count: int = 0
    quote_count: int = 0


class TwitterReferencedTweet(BaseModel):
    """Reference from a tweet to another tweet (retweet, reply, quote)."""

    type: str
    id: str


class Tweet(BaseModel):
    """Tweet object from /2/users/{id}/tweets."""

    id: str
    text: str
    created_at: str
    author_id: str | None = None
    public_metrics: TwitterPublicMetrics = Field(default_factory=TwitterPublicMetrics)
    referenced_tweets: list[TwitterReferencedTweet] | None = None


class TwitterUserResponse(BaseModel):
    """Envelope of a user lookup response."""

    data: TwitterUser | None = None
    errors: list[dict[str, object]] | None = None


class TwitterTimelineResponse(BaseModel):
    """Envelope of a user timeline response."""

    data: list[Tweet] = Field(default_factory=list)
    meta: dict[str, object] | None = None
