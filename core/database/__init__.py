"""Core database functionality."""

from .engine import (
    create_database_engine,
    create_database_tables,
)
from .repository import (
    SourcePostRepository,
    SummaryRepository,
)

__all__ = [
    "SourcePostRepository",
    "SummaryRepository",
    "create_database_engine",
    "create_database_tables",
]
