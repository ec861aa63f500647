"""Source post repository using SQLModel with dependency injection."""

from sqlmodel import Session, col, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.domain.post import SourcePostData
from core.models.rows import SourcePost

logger = get_logger(__name__)


class SourcePostRepository(BaseRepository[SourcePost]):
    """Posts owned by a cached summary."""

    def __init__(self, db: Session) -> None:
        """Initialize source post repository."""
        super().__init__(SourcePost, db)

    def get_by_summary_id(self, summary_id: str) -> list[SourcePost]:
        """Get posts of a summary, newest first.

        Args:
            summary_id: Owning summary ID

        Returns:
            Posts ordered by posted_at descending
        """
        statement = (
            select(SourcePost)
            .where(SourcePost.summary_id == summary_id)
            .order_by(
                col(SourcePost.posted_at).desc(),
                col(SourcePost.source_post_id).asc(),
            )
        )
        result = self.db.exec(statement)
        return list(result.all())

    def replace_for_summary(
        self,
        summary_id: str,
        posts: list[SourcePostData],
        commit: bool = True,
    ) -> list[SourcePost]:
        """Replace the whole post set of a summary.

        Existing posts are deleted and flushed before the new ones are
        inserted. Repeated post IDs in ``posts`` keep their first occurrence.

        Args:
            summary_id: Owning summary ID
            posts: New post set
            commit: Commit immediately instead of only flushing

        Returns:
            The stored posts
        """
        existing = self.db.exec(
            select(SourcePost).where(SourcePost.summary_id == summary_id)
        ).all()
        for post in existing:
            self.db.delete(post)
        self.db.flush()

        seen: set[str] = set()
        rows: list[SourcePost] = []
        for post in posts:
            if post.post_id in seen:
                logger.warning(
                    f"Skipping duplicate post {post.post_id} for summary {summary_id}"
                )
                continue
            seen.add(post.post_id)
            rows.append(SourcePost(summary_id=summary_id, **post.model_dump()))

        self.db.add_all(rows)
        self._finish(commit)
        logger.debug(
            f"Replaced {len(existing)} posts with {len(rows)} for summary {summary_id}"
        )
        return rows
