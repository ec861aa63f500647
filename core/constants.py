"""Application constants and configuration values."""

from typing import Final

# Cache freshness
DEFAULT_STALENESS_HOURS: Final[int] = 24

# Post fetching
DEFAULT_MAX_POSTS: Final[int] = 5
DEBUG_MAX_POSTS: Final[int] = 10
MIN_POST_LENGTH: Final[int] = 10
TWITTER_MIN_RESULTS: Final[int] = 5
TWITTER_MAX_RESULTS: Final[int] = 100
EXCLUDED_REFERENCE_TYPES: Final[frozenset[str]] = frozenset(
    {"retweeted", "replied_to"}
)

# Prompt assembly
MAX_PROMPT_POSTS: Final[int] = 5

# Generation parameters
BRIEF_MAX_TOKENS: Final[int] = 120
DETAILED_MAX_TOKENS: Final[int] = 200
FOLLOWUP_MAX_TOKENS: Final[int] = 75
DEFAULT_TEMPERATURE: Final[float] = 0.7

# Placeholder and fallback values
QUIET_SUMMARY: Final[str] = "This user hasn't posted any recent tweets to summarize."
QUIET_TAG: Final[str] = "quiet"
FALLBACK_TAG: Final[str] = "general"
QUIET_SENTIMENT: Final[str] = "neutral"
QUIET_ENGAGEMENT: Final[str] = "low"
FALLBACK_SENTIMENT: Final[str] = "neutral"
FALLBACK_ENGAGEMENT: Final[str] = "medium"
