"""Common type definitions for the glance system."""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class SummaryMode(str, Enum):
    """Summarization flavor requested from the language model."""

    BRIEF = "brief"
    DETAILED = "detailed"
