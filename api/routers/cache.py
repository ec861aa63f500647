"""Administrative cache router."""

from fastapi import APIRouter, Depends

from api.dependencies import get_cache_store
from api.utils.error_handler import handle_api_operation
from core.exceptions import NotFoundError
from core.models.api.responses import (
    CacheDeleteResponse,
    CacheEntryData,
    CacheEntryResponse,
)
from core.models.domain.summary import SummaryResult
from core.services.cache_store import SummaryCacheStore

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get("/{handle}", response_model=CacheEntryResponse)
def get_cache_entry(
    handle: str,
    cache_store: SummaryCacheStore = Depends(get_cache_store),
) -> CacheEntryResponse:
    """Show the cached summary of a handle without refreshing it."""

    def _get_entry() -> CacheEntryResponse:
        summary = cache_store.get(handle)
        if summary is None:
            raise NotFoundError(f"No cached summary for {handle}")

        posts = cache_store.get_posts(summary.summary_id)
        return CacheEntryResponse(
            data=CacheEntryData(
                summary_id=summary.summary_id,
                summary=SummaryResult.from_row(summary, cached=True),
                created_at=summary.created_at,
                stale=cache_store.is_stale(summary),
                stored_posts=len(posts),
            )
        )

    return handle_api_operation(
        _get_entry,
        error_message="Failed to read cache entry",
    )


@router.delete("/{handle}", response_model=CacheDeleteResponse)
def delete_cache_entry(
    handle: str,
    cache_store: SummaryCacheStore = Depends(get_cache_store),
) -> CacheDeleteResponse:
    """Delete the cached summary of a handle together with its posts."""

    def _delete_entry() -> CacheDeleteResponse:
        if not cache_store.delete(handle):
            raise NotFoundError(f"No cached summary for {handle}")
        return CacheDeleteResponse(message=f"Deleted cached summary for {handle}")

    return handle_api_operation(
        _delete_entry,
        error_message="Failed to delete cache entry",
    )
