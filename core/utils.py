"""Utility functions for the application."""

import re
from datetime import UTC, datetime

from core.log import get_logger

logger = get_logger(__name__)

HANDLE_MARKER = "@"
URL_PATTERN = re.compile(r"https?://\S+")
WHITESPACE_PATTERN = re.compile(r"\s+")


def get_current_timestamp() -> str:
    """Get current timestamp in ISO8601 format."""
    return datetime.now(UTC).isoformat()


def parse_datetime(date_str: str | None) -> datetime | None:
    """Parse datetime string to a timezone-aware Python datetime object.

    Naive values are assumed to be UTC.
    """
    if not date_str:
        return None

    try:
        parsed = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Could not parse date: {date_str}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def normalize_handle(handle: str | None) -> str:
    """Normalize a user handle for cache lookups.

    Strips surrounding whitespace and leading ``@`` markers, then lowercases.

    Args:
        handle: Raw handle as typed by the visitor

    Returns:
        Normalized handle, empty string if nothing usable remains
    """
    if not handle:
        return ""
    return handle.strip().lstrip(HANDLE_MARKER).strip().lower()


def clean_post_text(text: str) -> str:
    """Remove URLs and collapse whitespace in a post body."""
    cleaned = URL_PATTERN.sub("", text)
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def format_post_date(date_str: str) -> str:
    """Format an ISO timestamp as a short human-readable date (e.g. Mon Jan 01 2024)."""
    parsed = parse_datetime(date_str)
    if parsed is None:
        return date_str
    return parsed.strftime("%a %b %d %Y")
