"""Tests for PostSummarizationService against a mock OpenAI server."""

import json
from typing import Any

import pytest
from pytest_httpserver import HTTPServer

from core.exceptions import UpstreamError
from core.services.summarization_service import PostSummarizationService

TEXTS = [f"Post {i} about design tools and travel plans" for i in range(1, 8)]


def last_request_body(httpserver: HTTPServer) -> dict[str, Any]:
    request, _ = httpserver.log[-1]
    body: dict[str, Any] = json.loads(request.data.decode("utf-8"))
    return body


@pytest.mark.asyncio
async def test_summarize_brief(
    summarizer: PostSummarizationService, mock_openai_server: HTTPServer
) -> None:
    result = await summarizer.summarize_brief(TEXTS[:3], "alice", "Alice Example")

    assert result.summary.startswith("Alice has been shipping features")
    assert result.tags == ["a", "b", "c"]
    assert result.raw_response is not None
    assert result.raw_response["tags"] == ["a", "b", "c"]

    body = last_request_body(mock_openai_server)
    assert body["max_tokens"] == 120
    assert body["temperature"] == 0.7
    assert body["model"] == "super-ai-model"
    prompt = body["messages"][0]["content"]
    assert "@alice (Alice Example)" in prompt
    assert "1. Post 1 about design tools" in prompt


@pytest.mark.asyncio
async def test_prompt_includes_at_most_five_posts(
    summarizer: PostSummarizationService, mock_openai_server: HTTPServer
) -> None:
    await summarizer.summarize_brief(TEXTS, "alice")

    prompt = last_request_body(mock_openai_server)["messages"][0]["content"]
    assert "5. Post 5" in prompt
    assert "6. Post 6" not in prompt
    assert "Recent tweets from @alice:\n" in prompt


@pytest.mark.asyncio
async def test_summarize_detailed_strips_code_fences(
    summarizer: PostSummarizationService, mock_openai_server: HTTPServer
) -> None:
    result = await summarizer.summarize_detailed(TEXTS[:3], "alice", "Alice Example")

    assert result.summary == "Alice is busy with product work and travel."
    assert result.topics == ["Design", "Travel", "Books"]
    assert result.sentiment == "positive"
    assert result.engagement == "high"
    assert last_request_body(mock_openai_server)["max_tokens"] == 200


@pytest.mark.asyncio
async def test_brief_falls_back_to_raw_text(
    summarizer: PostSummarizationService,
    mock_openai_server: HTTPServer,
    openai_responses: dict[str, Any],
) -> None:
    mock_openai_server.expect_oneshot_request(
        "/v1/chat/completions", method="POST"
    ).respond_with_json(openai_responses["plain_text_response"])

    result = await summarizer.summarize_brief(TEXTS[:2], "alice")

    assert result.summary == "Alice mostly posts about design."
    assert result.tags == ["general"]
    assert result.raw_response == {"content": "Alice mostly posts about design."}


@pytest.mark.asyncio
async def test_detailed_falls_back_to_defaults(
    summarizer: PostSummarizationService,
    mock_openai_server: HTTPServer,
    openai_responses: dict[str, Any],
) -> None:
    mock_openai_server.expect_oneshot_request(
        "/v1/chat/completions", method="POST"
    ).respond_with_json(openai_responses["plain_text_response"])

    result = await summarizer.summarize_detailed(TEXTS[:2], "alice")

    assert result.summary == "Alice mostly posts about design."
    assert result.topics == ["general"]
    assert result.sentiment == "neutral"
    assert result.engagement == "medium"
    assert result.raw_response == {"content": "Alice mostly posts about design."}


@pytest.mark.asyncio
async def test_empty_completion_is_upstream_error(
    summarizer: PostSummarizationService,
    mock_openai_server: HTTPServer,
    openai_responses: dict[str, Any],
) -> None:
    mock_openai_server.expect_oneshot_request(
        "/v1/chat/completions", method="POST"
    ).respond_with_json(openai_responses["empty_response"])

    with pytest.raises(UpstreamError):
        await summarizer.complete("What is she up to?")


@pytest.mark.asyncio
async def test_complete_returns_trimmed_text(
    summarizer: PostSummarizationService, mock_openai_server: HTTPServer
) -> None:
    answer = await summarizer.complete("What is she up to?")

    assert answer == "She's heading to Lisbon next week for a conference."
    body = last_request_body(mock_openai_server)
    assert body["max_tokens"] == 75
    assert body["messages"] == [{"role": "user", "content": "What is she up to?"}]


@pytest.mark.asyncio
async def test_brief_with_missing_summary_uses_raw_text(
    summarizer: PostSummarizationService,
    mock_openai_server: HTTPServer,
    openai_responses: dict[str, Any],
) -> None:
    payload = json.loads(json.dumps(openai_responses["plain_text_response"]))
    payload["choices"][0]["message"]["content"] = '{"tags": ["AI", ""]}'
    mock_openai_server.expect_oneshot_request(
        "/v1/chat/completions", method="POST"
    ).respond_with_json(payload)

    result = await summarizer.summarize_brief(TEXTS[:2], "alice")

    assert result.summary == '{"tags": ["AI", ""]}'
    assert result.tags == ["AI"]
    assert result.raw_response == {"summary": "", "tags": ["AI"]}
