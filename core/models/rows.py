"""SQLModel database models for Glance."""

from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, Index, Relationship, SQLModel

from core.types import SummaryMode
from core.utils import get_current_timestamp


def generate_summary_id() -> str:
    """Generate an opaque summary identifier."""
    return uuid4().hex


class Summary(SQLModel, table=True):
    """Cached summary of a handle's recent posts."""

    summary_id: str = Field(default_factory=generate_summary_id, primary_key=True)
    handle: str = Field(
        unique=True, index=True, description="Lowercased handle without marker"
    )
    display_name: str | None = Field(default=None, description="Author display name")
    summary: str = Field(description="Short natural-language summary")
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Topic tags in display order",
    )
    raw_response: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Opaque payload returned by the summarization call",
    )
    post_count: int = Field(default=0, ge=0, description="Posts summarized")
    mode: SummaryMode = Field(
        default=SummaryMode.BRIEF, description="Summarization flavor: brief, detailed"
    )
    topics: list[str] | None = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Detailed mode topics",
    )
    sentiment: str | None = Field(default=None, description="Detailed mode sentiment")
    engagement: str | None = Field(
        default=None, description="Detailed mode engagement level"
    )
    created_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime of first summarization",
    )
    updated_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime - advanced on every refresh",
    )

    # Relationship attributes
    posts: list["SourcePost"] = Relationship(
        back_populates="summary",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class SourcePost(SQLModel, table=True):
    """Cleaned post a summary was derived from."""

    __tablename__ = "source_post"

    source_post_id: int | None = Field(default=None, primary_key=True)
    summary_id: str = Field(foreign_key="summary.summary_id", ondelete="CASCADE")
    post_id: str = Field(description="External post identifier")
    text: str = Field(description="Cleaned post text")
    posted_at: str = Field(description="ISO8601 datetime of the original post")
    like_count: int = Field(default=0, ge=0)
    repost_count: int = Field(default=0, ge=0)

    # Performance indexes
    __table_args__ = (
        UniqueConstraint("summary_id", "post_id", name="uq_source_post_summary_post"),
        Index("idx_source_post_summary_posted", "summary_id", "posted_at"),
    )

    # Relationship attributes
    summary: Summary = Relationship(back_populates="posts")
