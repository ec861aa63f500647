"""OpenAI chat completion client using the official async client."""

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from core.exceptions import (
    UpstreamConfigError,
    UpstreamError,
    UpstreamRateLimitError,
)
from core.log import get_logger
from core.models.external.openai import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    OpenAIMessage,
)

logger = get_logger(__name__)


class UnifiedOpenAIClient:
    """Thin wrapper over AsyncOpenAI chat completions.

    Requests are attempted exactly once: the official client is built with
    ``max_retries=0`` and nothing here retries either.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 60.0,
        model: str = "gpt-4o-mini",
    ) -> None:
        """Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key, may be empty when unconfigured
            base_url: OpenAI API base URL
            timeout: Request timeout in seconds
            model: Default model to use
        """
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._client: AsyncOpenAI | None = None

        if api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=self._base_url,
                timeout=timeout,
                max_retries=0,
            )

        logger.info(
            f"Initialized {self.__class__.__name__} "
            f"with {base_url=}, {model=}, configured={self.is_configured}"
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def is_configured(self) -> bool:
        """Whether an API key was provided."""
        return self._client is not None

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def create_chat_completion(
        self,
        messages: list[OpenAIMessage],
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> ChatCompletionResponse:
        """Create a chat completion request.

        Args:
            messages: List of messages for the conversation
            model: Model to use (defaults to client model)
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            Chat completion response

        Raises:
            UpstreamConfigError: If no API key is configured or it is rejected
            UpstreamRateLimitError: If OpenAI signals rate limiting
            UpstreamError: For any other request or response failure
        """
        if self._client is None:
            raise UpstreamConfigError(
                "OpenAI API configuration error: OPENAI_API_KEY is not set"
            )

        payload = ChatCompletionRequest(
            model=model or self._model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        logger.debug(f"/v1/chat/completions model={payload.model}")
        logger.debug(f"Request payload:\n{payload.model_dump_json(indent=2)}")

        try:
            response = await self._client.chat.completions.create(
                **payload.model_dump(exclude_none=True)
            )
        except openai.RateLimitError as e:
            raise UpstreamRateLimitError("OpenAI API rate limit exceeded") from e
        except openai.AuthenticationError as e:
            raise UpstreamConfigError("OpenAI API rejected the API key") from e
        except openai.APIError as e:
            raise UpstreamError(f"OpenAI API request failed: {e}") from e

        response_dict = response.model_dump()
        logger.debug(f"Response received: {response_dict}")

        try:
            return ChatCompletionResponse.model_validate(response_dict)
        except ValidationError as e:
            raise UpstreamError(f"Malformed OpenAI response: {e}") from e
