"""Summary repository using SQLModel with dependency injection."""

from typing import Any

from sqlmodel import Session, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import Summary
from core.utils import get_current_timestamp

logger = get_logger(__name__)

# Fields callers may set through upsert; identity and timestamps are managed here
UPSERT_FIELDS = frozenset(
    {
        "display_name",
        "summary",
        "tags",
        "raw_response",
        "post_count",
        "mode",
        "topics",
        "sentiment",
        "engagement",
    }
)


class SummaryRepository(BaseRepository[Summary]):
    """Summary repository using SQLModel with dependency injection."""

    def __init__(self, db: Session) -> None:
        """Initialize summary repository."""
        super().__init__(Summary, db)

    def get_by_handle(self, handle: str) -> Summary | None:
        """Get summary by normalized handle.

        Args:
            handle: Lowercased handle

        Returns:
            Summary if found, None otherwise
        """
        statement = select(Summary).where(Summary.handle == handle)
        result = self.db.exec(statement)
        return result.first()

    def upsert(self, handle: str, fields: dict[str, Any], commit: bool = True) -> Summary:
        """Create the summary for a handle, or update it in place.

        Args:
            handle: Lowercased handle
            fields: Column values to write
            commit: Commit immediately instead of only flushing

        Returns:
            The stored summary
        """
        unknown = set(fields) - UPSERT_FIELDS
        if unknown:
            raise ValueError(f"Unknown summary fields: {sorted(unknown)}")

        summary = self.get_by_handle(handle)
        if summary is None:
            summary = Summary(handle=handle, **fields)
            logger.debug(f"Creating summary for {handle}")
        else:
            for name, value in fields.items():
                setattr(summary, name, value)
            summary.updated_at = get_current_timestamp()
            logger.debug(f"Updating summary {summary.summary_id} for {handle}")

        self.db.add(summary)
        self._finish(commit)
        self.db.refresh(summary)
        return summary

    def delete_by_handle(self, handle: str, commit: bool = True) -> bool:
        """Delete the summary for a handle together with its posts.

        Returns:
            True if deleted, False if not found
        """
        summary = self.get_by_handle(handle)
        if summary is None:
            return False

        self.db.delete(summary)
        self._finish(commit)
        logger.info(f"Deleted summary for {handle}")
        return True
