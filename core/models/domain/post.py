"""Post domain models."""

from pydantic import BaseModel, Field


class AuthorInfo(BaseModel):
    """Lightweight author metadata returned by a post source."""

    author_id: str = Field(..., description="External author identifier")
    handle: str = Field(..., description="Author handle as reported upstream")
    display_name: str | None = Field(None, description="Human-readable name")


class SourcePostData(BaseModel):
    """Cleaned post ready for summarization and storage."""

    post_id: str = Field(..., description="External post identifier")
    text: str = Field(..., description="Cleaned post text")
    posted_at: str = Field(..., description="ISO8601 datetime of the post")
    like_count: int = Field(default=0, ge=0)
    repost_count: int = Field(default=0, ge=0)


class PostBundle(BaseModel):
    """Author metadata plus the qualifying posts fetched for it."""

    author: AuthorInfo
    posts: list[SourcePostData] = Field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        """Cleaned post texts in fetch order."""
        return [post.text for post in self.posts]
