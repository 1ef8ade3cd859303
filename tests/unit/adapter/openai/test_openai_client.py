"""Unit tests for the OpenAI assistant client, against a mock transport."""

import json

import httpx
import pytest

from eduforum.adapter.openai import OpenAIAssistantClient, OpenAIError


@pytest.fixture
def client() -> OpenAIAssistantClient:
    return OpenAIAssistantClient(
        api_key="sk-test",
        base_url="https://llm.test/v1/",
        chat_model="chat-model",
        moderation_model="moderation-model",
    )


@pytest.fixture
def route(monkeypatch):
    """Route every httpx.AsyncClient through a handler; returns captured requests."""
    captured: list[httpx.Request] = []
    original = httpx.AsyncClient

    def install(handler):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda **kwargs: original(
                transport=httpx.MockTransport(recording_handler), **kwargs
            ),
        )
        return captured

    return install


class TestModerate:
    """Tests for moderate."""

    @pytest.mark.asyncio
    async def test_flagged(self, client, route):
        # Arrange
        requests = route(
            lambda request: httpx.Response(200, json={"results": [{"flagged": True}]})
        )

        # Act
        flagged = await client.moderate("some text")

        # Assert
        assert flagged is True
        [request] = requests
        assert str(request.url) == "https://llm.test/v1/moderations"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert json.loads(request.content) == {
            "model": "moderation-model",
            "input": "some text",
        }

    @pytest.mark.asyncio
    async def test_not_flagged(self, client, route):
        route(lambda request: httpx.Response(200, json={"results": [{"flagged": False}]}))

        assert await client.moderate("fine") is False

    @pytest.mark.asyncio
    async def test_malformed_reply(self, client, route):
        route(lambda request: httpx.Response(200, json={"results": []}))

        with pytest.raises(OpenAIError):
            await client.moderate("fine")


class TestCompletions:
    """Tests for summarize and classify_sentiment."""

    @pytest.mark.asyncio
    async def test_summarize_returns_reply_text(self, client, route):
        # Arrange
        requests = route(
            lambda request: httpx.Response(
                200,
                json={"choices": [{"message": {"content": " A summary. "}}]},
            )
        )

        # Act
        reply = await client.summarize("Post Title: Office hours")

        # Assert
        assert reply == " A summary. "
        payload = json.loads(requests[0].content)
        assert str(requests[0].url) == "https://llm.test/v1/chat/completions"
        assert payload["model"] == "chat-model"
        assert payload["max_tokens"] == 150
        assert payload["messages"][0]["role"] == "system"
        assert "Post Title: Office hours" in payload["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_sentiment_asks_for_one_token(self, client, route):
        requests = route(
            lambda request: httpx.Response(
                200, json={"choices": [{"message": {"content": "Positive"}}]}
            )
        )

        reply = await client.classify_sentiment("I love it")

        assert reply == "Positive"
        payload = json.loads(requests[0].content)
        assert payload["temperature"] == 0
        assert payload["max_tokens"] == 1

    @pytest.mark.asyncio
    async def test_null_content_is_empty_string(self, client, route):
        route(
            lambda request: httpx.Response(
                200, json={"choices": [{"message": {"content": None}}]}
            )
        )

        assert await client.summarize("thread") == ""


class TestFailures:
    """Provider failures surface as OpenAIError."""

    @pytest.mark.asyncio
    async def test_non_200(self, client, route):
        route(lambda request: httpx.Response(429, text="rate limited"))

        with pytest.raises(OpenAIError, match="429"):
            await client.summarize("thread")

    @pytest.mark.asyncio
    async def test_transport_error(self, client, route):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        route(fail)

        with pytest.raises(OpenAIError):
            await client.moderate("text")

    @pytest.mark.asyncio
    async def test_invalid_json(self, client, route):
        route(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(OpenAIError):
            await client.classify_sentiment("text")
