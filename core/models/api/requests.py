"""API request models."""

from pydantic import AliasChoices, BaseModel, Field


class ChatRequest(BaseModel):
    """Request model for a follow-up question."""

    handle: str = Field(
        default="",
        validation_alias=AliasChoices("handle", "username"),
        description="Handle of a previously summarized user",
    )
    question: str = Field(default="", description="Free-form question")
