"""API response models."""

from pydantic import BaseModel, Field

from core.models.domain.post import AuthorInfo, SourcePostData
from core.models.domain.summary import SummaryResult


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: str


class SummaryResponse(BaseModel):
    """Response model for GET /summary."""

    success: bool = True
    data: SummaryResult


class ChatData(BaseModel):
    """Payload of a follow-up answer."""

    response: str


class ChatResponse(BaseModel):
    """Response model for POST /chat."""

    success: bool = True
    data: ChatData


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str
    timestamp: str
    twitter_configured: bool
    openai_configured: bool


class PostsData(BaseModel):
    """Payload of the diagnostic posts endpoint."""

    author: AuthorInfo
    posts: list[SourcePostData] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)


class PostsResponse(BaseModel):
    """Response model for GET /posts."""

    success: bool = True
    data: PostsData


class CacheEntryData(BaseModel):
    """Administrative view of a cached summary."""

    summary_id: str
    summary: SummaryResult
    created_at: str
    stale: bool
    stored_posts: int = Field(default=0, ge=0)


class CacheEntryResponse(BaseModel):
    """Response model for GET /cache/{handle}."""

    success: bool = True
    data: CacheEntryData


class CacheDeleteResponse(BaseModel):
    """Response model for DELETE /cache/{handle}."""

    success: bool = True
    message: str
