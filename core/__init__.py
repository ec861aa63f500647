"""Core functionality for the glance system."""

from .config import Settings, load_settings
from .log import (
    get_logger,
    setup_logging,
    setup_test_logging,
)
from .types import Environment, SummaryMode

__all__ = [
    "Environment",
    "Settings",
    "SummaryMode",
    "load_settings",
    "get_logger",
    "setup_logging",
    "setup_test_logging",
]
