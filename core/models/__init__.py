"""Unified models package for glance system."""

# API models (request/response)
from core.models.api.requests import ChatRequest
from core.models.api.responses import (
    CacheDeleteResponse,
    CacheEntryData,
    CacheEntryResponse,
    ChatData,
    ChatResponse,
    ErrorResponse,
    HealthResponse,
    PostsData,
    PostsResponse,
    SummaryResponse,
)

# Domain models (core business logic)
from core.models.domain.post import AuthorInfo, PostBundle, SourcePostData
from core.models.domain.summary import BriefSummary, DetailedSummary, SummaryResult

# Database rows
from core.models.rows import SourcePost, Summary

__all__ = [
    # API models
    "ChatRequest",
    "CacheDeleteResponse",
    "CacheEntryData",
    "CacheEntryResponse",
    "ChatData",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
    "PostsData",
    "PostsResponse",
    "SummaryResponse",
    # Domain models
    "AuthorInfo",
    "PostBundle",
    "SourcePostData",
    "BriefSummary",
    "DetailedSummary",
    "SummaryResult",
    # Database rows
    "SourcePost",
    "Summary",
]
