"""Diagnostic posts router."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_post_source
from api.utils.error_handler import handle_async_api_operation
from core.exceptions import InvalidInputError
from core.models.api.responses import PostsData, PostsResponse
from core.sources.base import BasePostSource
from core.utils import normalize_handle

router = APIRouter(tags=["posts"])


@router.get("/posts", response_model=PostsResponse)
async def get_posts(
    handle: str = Query(default="", description="Handle to fetch posts for"),
    limit: int = Query(default=10, ge=1, le=100, description="Maximum posts"),
    post_source: BasePostSource = Depends(get_post_source),
) -> PostsResponse:
    """Fetch cleaned recent posts straight from the source, bypassing the cache."""

    async def _get_posts() -> PostsResponse:
        key = normalize_handle(handle)
        if not key:
            raise InvalidInputError("Username is required")

        bundle = await post_source.fetch_posts_for_summary(key, limit)
        return PostsResponse(
            data=PostsData(
                author=bundle.author,
                posts=bundle.posts,
                count=len(bundle.posts),
            )
        )

    return await handle_async_api_operation(
        _get_posts,
        error_message="Failed to fetch posts",
        not_found_message="User not found",
    )
