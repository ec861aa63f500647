"""Post sources supplying recent posts for summarization."""

from .base import BasePostSource
from .twitter import TwitterPostSource

__all__ = [
    "BasePostSource",
    "TwitterPostSource",
]
