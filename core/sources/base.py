"""Base classes for post sources."""

from abc import ABC, abstractmethod

from core.exceptions import NotFoundError
from core.log import get_logger
from core.models.domain.post import AuthorInfo, PostBundle, SourcePostData

logger = get_logger(__name__)


class BasePostSource(ABC):
    """Base class for services that supply a user's recent posts."""

    @abstractmethod
    async def get_author(self, handle: str) -> AuthorInfo | None:
        """Resolve a handle to its author.

        Args:
            handle: Normalized handle

        Returns:
            Author metadata, or None if the handle does not exist
        """
        pass

    @abstractmethod
    async def get_recent_posts(
        self, author_id: str, limit: int
    ) -> list[SourcePostData]:
        """Fetch the author's most recent original posts, already cleaned.

        Args:
            author_id: External author identifier
            limit: Number of recent posts to request

        Returns:
            Cleaned posts, reposts and replies excluded
        """
        pass

    async def fetch_posts_for_summary(self, handle: str, limit: int) -> PostBundle:
        """Resolve a handle and fetch its qualifying posts.

        Args:
            handle: Normalized handle
            limit: Maximum number of posts to return

        Returns:
            Author metadata with at most ``limit`` cleaned posts

        Raises:
            NotFoundError: If the handle does not exist upstream
        """
        author = await self.get_author(handle)
        if author is None:
            raise NotFoundError(f"User @{handle} not found")

        posts = await self.get_recent_posts(author.author_id, limit)
        logger.info(
            f"Found {len(posts)} qualifying posts for @{author.handle} "
            f"from {self.get_source_name()}"
        )
        return PostBundle(author=author, posts=posts[:limit])

    async def close(self) -> None:
        """Release network resources held by the source."""
        return None

    def get_source_name(self) -> str:
        """Get the name of the source (e.g. 'Twitter')."""
        return self.__class__.__name__.replace("PostSource", "")
