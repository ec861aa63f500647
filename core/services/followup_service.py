"""Follow-up question answering over cached summaries."""

from core import get_logger
from core.constants import DEFAULT_TEMPERATURE, FOLLOWUP_MAX_TOKENS
from core.exceptions import InvalidInputError, NotFoundError
from core.llm.prompts import FOLLOWUP_POST_LINE, FOLLOWUP_PROMPT
from core.models.rows import SourcePost, Summary
from core.services.cache_store import SummaryCacheStore
from core.services.summarization_service import PostSummarizationService
from core.utils import format_post_date, normalize_handle

logger = get_logger(__name__)


def build_followup_prompt(
    summary: Summary, posts: list[SourcePost], question: str
) -> str:
    """Build the follow-up prompt from a cached summary and its posts.

    Args:
        summary: Cached summary record
        posts: Stored posts of the summary, newest first
        question: Visitor question, embedded verbatim

    Returns:
        Prompt text for a single-message completion
    """
    post_lines = "\n".join(
        FOLLOWUP_POST_LINE.format(
            index=i,
            text=post.text,
            likes=post.like_count,
            reposts=post.repost_count,
            posted=format_post_date(post.posted_at),
        )
        for i, post in enumerate(posts, 1)
    )
    return FOLLOWUP_PROMPT.format(
        display_name=summary.display_name or summary.handle,
        handle=summary.handle,
        posts=post_lines,
        question=question,
    )


class FollowUpService:
    """Answer questions about a person using their cached posts."""

    def __init__(
        self,
        cache_store: SummaryCacheStore,
        summarizer: PostSummarizationService,
    ) -> None:
        self.cache_store = cache_store
        self.summarizer = summarizer

    async def answer_question(self, handle: str, question: str) -> str:
        """Answer a question about a previously summarized handle.

        The cached record is used regardless of its age.

        Raises:
            InvalidInputError: If the handle or question is empty
            NotFoundError: If nothing is cached for the handle
            UpstreamError: If the completion fails or comes back empty
        """
        key = normalize_handle(handle)
        if not key or not question or not question.strip():
            raise InvalidInputError("Username and question are required")

        summary = self.cache_store.get(key)
        if summary is None:
            raise NotFoundError("No data found for this user")

        posts = self.cache_store.get_posts(summary.summary_id)
        if not posts:
            raise NotFoundError("No tweets found for this user")

        prompt = build_followup_prompt(summary, posts, question)
        logger.info(f"[@{key}] Answering question over {len(posts)} posts")
        return await self.summarizer.complete(
            prompt,
            max_tokens=FOLLOWUP_MAX_TOKENS,
            temperature=DEFAULT_TEMPERATURE,
        )
