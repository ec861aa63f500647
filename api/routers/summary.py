"""Summary router."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_summary_service
from api.utils.error_handler import handle_async_api_operation
from core.models.api.responses import SummaryResponse
from core.services.summary_service import SummaryService
from core.types import SummaryMode

router = APIRouter(tags=["summary"])


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    handle: str = Query(default="", description="Handle to summarize"),
    detailed: bool = Query(default=False, description="Request a detailed analysis"),
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """Get the summary for a handle, refreshing it when stale.

    Args:
        handle: Handle to summarize, with or without a leading "@"
        detailed: Whether to request topics, sentiment and engagement

    Returns:
        Cached or freshly generated summary

    Raises:
        HTTPException: 400 for an empty handle, 404 for an unknown user,
            429 when rate limited, 500 for any other failure
    """
    mode = SummaryMode.DETAILED if detailed else SummaryMode.BRIEF

    async def _get_summary() -> SummaryResponse:
        result = await summary_service.get_or_refresh_summary(handle, mode)
        return SummaryResponse(data=result)

    return await handle_async_api_operation(
        _get_summary,
        error_message="Failed to generate summary",
        not_found_message="User not found",
    )
