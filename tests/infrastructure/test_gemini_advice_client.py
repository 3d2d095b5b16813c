"""Tests for the Gemini advice client."""

import asyncio
import json
from unittest.mock import MagicMock

import httpx
import pytest

from src.infrastructure.gemini_advice_client import (
    EMPTY_RESPONSE_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    GeminiAdviceClient,
)


def _client(handler, api_key="key-123") -> GeminiAdviceClient:
    return GeminiAdviceClient(
        api_key=api_key,
        model="gemini-test",
        base_url="https://example.test/v1beta",
        transport=httpx.MockTransport(handler),
        logger=MagicMock(),
    )


def test_get_advice_posts_context_and_joins_parts() -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["key"] = request.headers["x-goog-api-key"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "candidates": [
                    {
                        "content": {
                            "parts": [{"text": "Tabung "}, {"text": "10%."}]
                        }
                    }
                ]
            },
        )

    answer = asyncio.run(_client(handler).get_advice("q", "context text"))

    assert answer == "Tabung 10%."
    assert captured["url"] == (
        "https://example.test/v1beta/models/gemini-test:generateContent"
    )
    assert captured["key"] == "key-123"
    assert captured["body"] == {
        "contents": [{"parts": [{"text": "context text"}]}]
    }


def test_get_advice_without_key_skips_request() -> None:
    handler = MagicMock()

    answer = asyncio.run(_client(handler, api_key=None).get_advice("q", "c"))

    assert answer == MISSING_API_KEY_MESSAGE
    handler.assert_not_called()


def test_get_advice_with_empty_candidates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"candidates": []})

    answer = asyncio.run(_client(handler).get_advice("q", "c"))

    assert answer == EMPTY_RESPONSE_MESSAGE


def test_get_advice_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "down"})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_client(handler).get_advice("q", "c"))
