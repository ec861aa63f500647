"""Repository layer for database operations."""

from .source_post import SourcePostRepository
from .summary import SummaryRepository

__all__ = [
    "SourcePostRepository",
    "SummaryRepository",
]
