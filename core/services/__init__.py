"""Core services package."""

from .cache_store import SummaryCacheStore
from .followup_service import FollowUpService, build_followup_prompt
from .summarization_service import PostSummarizationService
from .summary_service import SummaryService

__all__ = [
    "FollowUpService",
    "PostSummarizationService",
    "SummaryCacheStore",
    "SummaryService",
    "build_followup_prompt",
]
