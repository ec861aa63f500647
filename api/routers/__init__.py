"""API routers package."""

from .cache import router as cache_router
from .chat import router as chat_router
from .common import router as common_router
from .posts import router as posts_router
from .summary import router as summary_router

__all__ = [
    "cache_router",
    "chat_router",
    "common_router",
    "posts_router",
    "summary_router",
]
