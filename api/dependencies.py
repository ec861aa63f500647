"""FastAPI dependencies backed by app.state."""

from fastapi import Request

from core.config import Settings
from core.services.cache_store import SummaryCacheStore
from core.services.followup_service import FollowUpService
from core.services.summary_service import SummaryService
from core.sources.base import BasePostSource


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_cache_store(request: Request) -> SummaryCacheStore:
    """Get summary cache store from app state."""
    cache_store: SummaryCacheStore = request.app.state.cache_store
    return cache_store


def get_post_source(request: Request) -> BasePostSource:
    """Get post source from app state."""
    post_source: BasePostSource = request.app.state.post_source
    return post_source


def get_summary_service(request: Request) -> SummaryService:
    """Get summary orchestrator from app state."""
    service: SummaryService = request.app.state.summary_service
    return service


def get_followup_service(request: Request) -> FollowUpService:
    """Get follow-up answerer from app state."""
    service: FollowUpService = request.app.state.followup_service
    return service
