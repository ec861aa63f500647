"""OpenAI API models for external service integration."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from core.constants import FALLBACK_ENGAGEMENT, FALLBACK_SENTIMENT, FALLBACK_TAG


class TokenUsage(BaseModel):
    """Generic token usage model for LLM requests."""

    prompt_tokens: int = Field(description="Number of tokens in the prompt")
    completion_tokens: int = Field(description="Number of tokens in the completion")
    total_tokens: int = Field(description="Total number of tokens used")


class OpenAIMessage(BaseModel):
    """OpenAI API message model."""

    role: Literal["system", "user", "assistant"]
    content: str | None = None


class OpenAIChoice(BaseModel):
    """OpenAI API choice model."""

    index: int
    message: OpenAIMessage
    finish_reason: str | None = None


class ChatCompletionRequest(BaseModel):
    """OpenAI API chat completion request model."""

    model: str
    messages: list[OpenAIMessage]
    max_tokens: int | None = None
    temperature: float | None = None


class ChatCompletionResponse(BaseModel):
    """OpenAI API chat completion response model."""

    id: str
    object: str
    created: int
    model: str
    choices: list[OpenAIChoice]
    usage: TokenUsage | None = None

    @property
    def content(self) -> str:
        """Trimmed content of the first choice, empty when absent."""
        if not self.choices:
            return ""
        return (self.choices[0].message.content or "").strip()


def _clean_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _clean_labels(value: Any) -> list[str]:
    if not isinstance(value, list):
        return [FALLBACK_TAG]
    labels = [str(item).strip() for item in value if str(item).strip()]
    return labels or [FALLBACK_TAG]


class BriefAnalysis(BaseModel):
    """Brief summary JSON answered by the model."""

    summary: str = Field(default="", description="Short summary, empty if missing")
    tags: list[str] = Field(
        default_factory=lambda: [FALLBACK_TAG], description="Topic tags"
    )

    @field_validator("summary", mode="before")
    @classmethod
    def validate_summary(cls, v: Any) -> str:
        return _clean_text(v, "")

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> list[str]:
        return _clean_labels(v)

    @classmethod
    def from_json_string(cls, json_str: str) -> "BriefAnalysis":
        """Create BriefAnalysis from JSON string with validation."""
        return cls.model_validate_json(json_str)


class DetailedAnalysis(BaseModel):
    """Detailed analysis JSON answered by the model."""

    summary: str = Field(default="", description="Summary, empty if missing")
    topics: list[str] = Field(
        default_factory=lambda: [FALLBACK_TAG], description="Main topics"
    )
    sentiment: str = Field(default=FALLBACK_SENTIMENT, description="Overall tone")
    engagement: str = Field(
        default=FALLBACK_ENGAGEMENT, description="Engagement level"
    )

    @field_validator("summary", mode="before")
    @classmethod
    def validate_summary(cls, v: Any) -> str:
        return _clean_text(v, "")

    @field_validator("topics", mode="before")
    @classmethod
    def validate_topics(cls, v: Any) -> list[str]:
        return _clean_labels(v)

    @field_validator("sentiment", mode="before")
    @classmethod
    def validate_sentiment(cls, v: Any) -> str:
        return _clean_text(v, FALLBACK_SENTIMENT)

    @field_validator("engagement", mode="before")
    @classmethod
    def validate_engagement(cls, v: Any) -> str:
        return _clean_text(v, FALLBACK_ENGAGEMENT)

    @classmethod
    def from_json_string(cls, json_str: str) -> "DetailedAnalysis":
        """Create DetailedAnalysis from JSON string with validation."""
        return cls.model_validate_json(json_str)
