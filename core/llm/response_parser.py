"""Utility functions for parsing chat completions with Pydantic validation."""

import re
from typing import TypeVar

from pydantic import ValidationError

from core.log import get_logger
from core.models.external.openai import BriefAnalysis, DetailedAnalysis

logger = get_logger(__name__)

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\s*", re.IGNORECASE)

AnalysisModel = TypeVar("AnalysisModel", BriefAnalysis, DetailedAnalysis)


def strip_code_fences(content: str) -> str:
    """Remove Markdown code fences the model sometimes wraps JSON in."""
    return CODE_FENCE_PATTERN.sub("", content).strip()


def parse_analysis_response(
    content: str,
    response_model: type[AnalysisModel],
) -> AnalysisModel | None:
    """Parse completion content using Pydantic validation.

    Args:
        content: Trimmed completion text
        response_model: Pydantic model class to validate against

    Returns:
        Validated response model instance or None if the content is not a
        JSON object
    """
    try:
        return response_model.from_json_string(strip_code_fences(content))
    except ValidationError as e:
        logger.warning(
            f"Failed to parse {response_model.__name__} response: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
        )
        return None
