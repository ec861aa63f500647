"""Follow-up chat router."""

from fastapi import APIRouter, Depends

from api.dependencies import get_followup_service
from api.utils.error_handler import handle_async_api_operation
from core.models.api.requests import ChatRequest
from core.models.api.responses import ChatData, ChatResponse
from core.services.followup_service import FollowUpService

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    followup_service: FollowUpService = Depends(get_followup_service),
) -> ChatResponse:
    """Answer a follow-up question about a summarized user."""

    async def _answer() -> ChatResponse:
        answer = await followup_service.answer_question(
            request.handle, request.question
        )
        return ChatResponse(data=ChatData(response=answer))

    return await handle_async_api_operation(
        _answer,
        error_message="Internal server error",
    )
