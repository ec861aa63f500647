"""Summary cache store backed by SQLModel repositories."""

from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from core.constants import DEFAULT_STALENESS_HOURS
from core.database.repository import SourcePostRepository, SummaryRepository
from core.exceptions import InvalidInputError, StorageError
from core.log import get_logger
from core.models.domain.post import SourcePostData
from core.models.rows import SourcePost, Summary
from core.utils import normalize_handle, parse_datetime

logger = get_logger(__name__)


class SummaryCacheStore:
    """Keyed summary cache with an owned post set per summary.

    Every operation runs in its own session on the shared engine. Read
    failures are logged and reported as a cache miss; write failures raise
    StorageError so the caller never believes a failed write succeeded.
    """

    def __init__(
        self,
        engine: Engine,
        staleness_window: timedelta = timedelta(hours=DEFAULT_STALENESS_HOURS),
    ) -> None:
        """Initialize the cache store.

        Args:
            engine: Database engine shared by the process
            staleness_window: Age after which a summary should be refreshed
        """
        self.engine = engine
        self.staleness_window = staleness_window

    def _session(self) -> Session:
        return Session(self.engine, expire_on_commit=False)

    def get(self, handle: str) -> Summary | None:
        """Look up the cached summary for a handle."""
        key = normalize_handle(handle)
        if not key:
            return None

        try:
            with self._session() as session:
                return SummaryRepository(session).get_by_handle(key)
        except SQLAlchemyError as e:
            logger.error(f"Cache read failed for {key}, treating as miss: {e}")
            return None

    def get_posts(self, summary_id: str) -> list[SourcePost]:
        """Get the stored posts of a summary, newest first."""
        try:
            with self._session() as session:
                return SourcePostRepository(session).get_by_summary_id(summary_id)
        except SQLAlchemyError as e:
            logger.error(f"Post read failed for summary {summary_id}: {e}")
            return []

    def upsert(self, handle: str, fields: dict[str, Any]) -> Summary:
        """Create or update the summary for a handle."""
        key = self._require_key(handle)
        try:
            with self._session() as session:
                return SummaryRepository(session).upsert(key, fields)
        except SQLAlchemyError as e:
            logger.error(f"Cache write failed for {key}: {e}")
            raise StorageError(f"Failed to store summary for {key}") from e

    def replace_posts(
        self, summary_id: str, posts: list[SourcePostData]
    ) -> list[SourcePost]:
        """Replace the post set of a summary in a single transaction."""
        try:
            with self._session() as session:
                return SourcePostRepository(session).replace_for_summary(
                    summary_id, posts
                )
        except SQLAlchemyError as e:
            logger.error(f"Post write failed for summary {summary_id}: {e}")
            raise StorageError(f"Failed to store posts for {summary_id}") from e

    def store_summary(
        self,
        handle: str,
        fields: dict[str, Any],
        posts: list[SourcePostData],
    ) -> Summary:
        """Upsert a summary and replace its posts in one transaction.

        Either both the summary fields and the post set are written, or
        neither is and the previous entry stays as it was.
        """
        key = self._require_key(handle)
        try:
            with self._session() as session:
                summary_repo = SummaryRepository(session)
                post_repo = SourcePostRepository(session)
                try:
                    summary = summary_repo.upsert(key, fields, commit=False)
                    post_repo.replace_for_summary(
                        summary.summary_id, posts, commit=False
                    )
                    session.commit()
                except SQLAlchemyError:
                    session.rollback()
                    raise
                session.refresh(summary)
                logger.info(
                    f"Stored summary {summary.summary_id} for {key} "
                    f"with {len(posts)} posts"
                )
                return summary
        except SQLAlchemyError as e:
            logger.error(f"Cache write failed for {key}: {e}")
            raise StorageError(f"Failed to store summary for {key}") from e

    def delete(self, handle: str) -> bool:
        """Delete the summary for a handle and its posts."""
        key = self._require_key(handle)
        try:
            with self._session() as session:
                return SummaryRepository(session).delete_by_handle(key)
        except SQLAlchemyError as e:
            logger.error(f"Cache delete failed for {key}: {e}")
            raise StorageError(f"Failed to delete summary for {key}") from e

    def is_stale(self, summary: Summary, now: datetime | None = None) -> bool:
        """Check whether a summary is older than the staleness window."""
        updated_at = parse_datetime(summary.updated_at)
        if updated_at is None:
            return True
        now = now or datetime.now(UTC)
        return now - updated_at > self.staleness_window

    def _require_key(self, handle: str) -> str:
        key = normalize_handle(handle)
        if not key:
            raise InvalidInputError("Handle must not be empty")
        return key
