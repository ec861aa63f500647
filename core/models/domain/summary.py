"""Summary domain models."""

from typing import Any

from pydantic import BaseModel, Field

from core.models.rows import Summary
from core.types import SummaryMode


class BriefSummary(BaseModel):
    """Short tagged summary produced by the language model."""

    summary: str
    tags: list[str] = Field(default_factory=list)
    raw_response: dict[str, Any] | None = None


class DetailedSummary(BaseModel):
    """Summary with topics, sentiment and engagement level."""

    summary: str
    topics: list[str] = Field(default_factory=list)
    sentiment: str
    engagement: str
    raw_response: dict[str, Any] | None = None


class SummaryResult(BaseModel):
    """Summary returned to callers of the orchestrator."""

    handle: str
    display_name: str | None = None
    summary: str
    tags: list[str] = Field(default_factory=list)
    post_count: int = Field(default=0, ge=0)
    mode: SummaryMode = SummaryMode.BRIEF
    topics: list[str] | None = None
    sentiment: str | None = None
    engagement: str | None = None
    cached: bool = Field(
        default=False, description="Whether the result was served from cache"
    )
    updated_at: str

    @classmethod
    def from_row(cls, row: Summary, cached: bool) -> "SummaryResult":
        """Create SummaryResult from a stored Summary row.

        Rows without a display name show the handle instead.
        """
        return cls(
            handle=row.handle,
            display_name=row.display_name or row.handle,
            summary=row.summary,
            tags=list(row.tags or []),
            post_count=row.post_count,
            mode=row.mode,
            topics=list(row.topics) if row.topics is not None else None,
            sentiment=row.sentiment,
            engagement=row.engagement,
            cached=cached,
            updated_at=row.updated_at,
        )
