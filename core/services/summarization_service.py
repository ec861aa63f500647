"""Post summarization service for turning posts into summaries."""

from core import get_logger
from core.constants import (
    BRIEF_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    DETAILED_MAX_TOKENS,
    FOLLOWUP_MAX_TOKENS,
    MAX_PROMPT_POSTS,
)
from core.exceptions import UpstreamError
from core.llm.openai_client import UnifiedOpenAIClient
from core.llm.prompts import BRIEF_PROMPT, DETAILED_PROMPT
from core.llm.response_parser import parse_analysis_response
from core.models.domain.summary import BriefSummary, DetailedSummary
from core.models.external.openai import (
    BriefAnalysis,
    DetailedAnalysis,
    OpenAIMessage,
)

logger = get_logger(__name__)


class PostSummarizationService:
    """Service for post summarization and free-form completions."""

    def __init__(self, llm_client: UnifiedOpenAIClient) -> None:
        """Initialize post summarization service.

        Args:
            llm_client: Chat completion client
        """
        self.llm_client = llm_client

    @staticmethod
    def _format_author(handle: str, display_name: str | None) -> str:
        if display_name:
            return f"@{handle} ({display_name})"
        return f"@{handle}"

    @staticmethod
    def _format_posts(texts: list[str]) -> str:
        return "\n".join(
            f"{i}. {text}" for i, text in enumerate(texts[:MAX_PROMPT_POSTS], 1)
        )

    def _create_messages(
        self,
        template: str,
        texts: list[str],
        handle: str,
        display_name: str | None,
    ) -> list[OpenAIMessage]:
        return [
            OpenAIMessage(
                role="user",
                content=template.format(
                    author=self._format_author(handle, display_name),
                    posts=self._format_posts(texts),
                ),
            )
        ]

    async def _request(
        self,
        messages: list[OpenAIMessage],
        max_tokens: int,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        response = await self.llm_client.create_chat_completion(
            messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        content = response.content
        if not content:
            raise UpstreamError("No response content received from OpenAI")
        return content

    async def summarize_brief(
        self,
        texts: list[str],
        handle: str,
        display_name: str | None = None,
    ) -> BriefSummary:
        """Summarize posts into a short text with topic tags.

        Only the first few posts are included in the prompt. When the model
        does not answer with valid JSON, the raw text becomes the summary and
        the tags fall back to a single generic tag. The fallback keeps the
        raw text in ``raw_response``.

        Raises:
            UpstreamError: If the request fails or returns no content
        """
        messages = self._create_messages(BRIEF_PROMPT, texts, handle, display_name)
        logger.info(f"[@{handle}] Brief summary requested for {len(texts)} posts")
        content = await self._request(messages, max_tokens=BRIEF_MAX_TOKENS)

        analysis = parse_analysis_response(content, BriefAnalysis)
        if analysis is None:
            logger.warning(f"[@{handle}] Using raw completion as summary")
            return BriefSummary(
                summary=content,
                tags=BriefAnalysis().tags,
                raw_response={"content": content},
            )

        return BriefSummary(
            summary=analysis.summary or content,
            tags=analysis.tags,
            raw_response=analysis.model_dump(),
        )

    async def summarize_detailed(
        self,
        texts: list[str],
        handle: str,
        display_name: str | None = None,
    ) -> DetailedSummary:
        """Summarize posts with topics, sentiment and engagement level."""
        messages = self._create_messages(
            DETAILED_PROMPT, texts, handle, display_name
        )
        logger.info(f"[@{handle}] Detailed summary requested for {len(texts)} posts")
        content = await self._request(messages, max_tokens=DETAILED_MAX_TOKENS)

        analysis = parse_analysis_response(content, DetailedAnalysis)
        if analysis is None:
            logger.warning(f"[@{handle}] Using raw completion as detailed summary")
            fallback = DetailedAnalysis()
            return DetailedSummary(
                summary=content,
                topics=fallback.topics,
                sentiment=fallback.sentiment,
                engagement=fallback.engagement,
                raw_response={"content": content},
            )

        return DetailedSummary(
            summary=analysis.summary or content,
            topics=analysis.topics,
            sentiment=analysis.sentiment,
            engagement=analysis.engagement,
            raw_response=analysis.model_dump(),
        )

    async def complete(
        self,
        prompt: str,
        max_tokens: int = FOLLOWUP_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Run a single-message completion and return the trimmed text."""
        messages = [OpenAIMessage(role="user", content=prompt)]
        return await self._request(messages, max_tokens, temperature)
