"""
Unit tests for chat service.
"""
import pytest
from unittest.mock import Mock, AsyncMock

from gemini_chat.config import Settings
from gemini_chat.models.schemas import ChatRequest
from gemini_chat.services.chat_service import ChatService
from gemini_chat.services.errors import (
    CHAT_ERROR_PREAMBLE,
    MODEL_NOT_FOUND_MESSAGE,
    QUOTA_EXCEEDED_MESSAGE,
)
from gemini_chat.services.gemini_client import Completion, TokenUsage


@pytest.fixture
def settings():
    return Settings(_env_file=None, GEMINI_API_KEY="test-key")


@pytest.fixture
def gemini():
    return Mock()


def fake_clock(*readings):
    """Clock returning the given monotonic readings (seconds) in order."""
    return Mock(side_effect=list(readings))


async def agen(items, error=None):
    for item in items:
        yield item
    if error is not None:
        raise error


async def collect(stream):
    return [fragment async for fragment in stream]


class TestSimpleChat:

    @pytest.mark.asyncio
    async def test_success(self, gemini, settings):
        gemini.generate = AsyncMock(return_value=Completion(
            text="Hello there",
            usage=TokenUsage(prompt_tokens=10, completion_tokens=5, total_tokens=15),
            finish_reason="STOP",
        ))
        service = ChatService(gemini, settings, clock=fake_clock(100.0, 100.125))

        resp = await service.simple_chat("Hi")

        assert resp.text == "Hello there"
        assert resp.model == "gemini-2.5-flash"
        assert resp.tokens_used == 15
        assert resp.prompt_tokens == 10
        assert resp.completion_tokens == 5
        assert resp.response_time_ms == 125
        assert resp.finish_reason == "STOP"
        gemini.generate.assert_awaited_once_with("Hi", temperature=None, max_output_tokens=None)

    @pytest.mark.asyncio
    async def test_missing_usage(self, gemini, settings):
        gemini.generate = AsyncMock(return_value=Completion(text="Hi"))
        service = ChatService(gemini, settings)

        resp = await service.simple_chat("Hi")

        assert resp.tokens_used is None
        assert resp.response_time_ms >= 0

    @pytest.mark.asyncio
    async def test_quota_error_is_absorbed(self, gemini, settings):
        gemini.generate = AsyncMock(side_effect=Exception("429 RESOURCE_EXHAUSTED"))
        service = ChatService(gemini, settings, clock=fake_clock(5.0, 5.5))

        resp = await service.simple_chat("Hi")

        assert resp.tokens_used == 0
        assert QUOTA_EXCEEDED_MESSAGE in resp.text
        assert resp.text.startswith(CHAT_ERROR_PREAMBLE)
        assert resp.response_time_ms == 500

    @pytest.mark.asyncio
    async def test_not_found_error(self, gemini, settings):
        gemini.generate = AsyncMock(side_effect=Exception("404 NOT_FOUND"))
        service = ChatService(gemini, settings)

        resp = await service.simple_chat("Hi")

        assert MODEL_NOT_FOUND_MESSAGE in resp.text

    @pytest.mark.asyncio
    async def test_other_error_passed_through(self, gemini, settings):
        gemini.generate = AsyncMock(side_effect=ConnectionError("socket closed"))
        service = ChatService(gemini, settings)

        resp = await service.simple_chat("Hi")

        assert resp.text == CHAT_ERROR_PREAMBLE + "socket closed"
        assert resp.tokens_used == 0

    @pytest.mark.asyncio
    async def test_none_message_never_raises(self, gemini, settings):
        gemini.generate = AsyncMock(side_effect=ValueError("contents must not be empty"))
        service = ChatService(gemini, settings)

        resp = await service.simple_chat(None)

        assert "contents must not be empty" in resp.text
        gemini.generate.assert_awaited_once_with("", temperature=None, max_output_tokens=None)


class TestCustomChat:

    @pytest.mark.asyncio
    async def test_uses_request_options(self, gemini, settings):
        gemini.generate = AsyncMock(return_value=Completion(text="Creative"))
        service = ChatService(gemini, settings)

        await service.custom_chat(ChatRequest(message="Write a poem", temperature=0.9, max_tokens=256))

        gemini.generate.assert_awaited_once_with("Write a poem", temperature=0.9, max_output_tokens=256)

    @pytest.mark.asyncio
    async def test_defaults_when_unset(self, gemini, settings):
        gemini.generate = AsyncMock(return_value=Completion(text="Plain"))
        service = ChatService(gemini, settings)

        await service.custom_chat(ChatRequest(message="Hello"))

        gemini.generate.assert_awaited_once_with("Hello", temperature=0.7, max_output_tokens=2048)

    @pytest.mark.asyncio
    async def test_errors_share_the_classifier(self, gemini, settings):
        gemini.generate = AsyncMock(side_effect=Exception("429 quota"))
        service = ChatService(gemini, settings)

        resp = await service.custom_chat(ChatRequest(message="Hello"))

        assert resp.tokens_used == 0
        assert QUOTA_EXCEEDED_MESSAGE in resp.text


class TestStreamChat:

    @pytest.mark.asyncio
    async def test_stream_success(self, gemini, settings):
        gemini.open_stream = AsyncMock(return_value=agen(["Hel", "lo"]))
        service = ChatService(gemini, settings)

        assert await collect(service.stream_chat("Hi")) == ["Hel", "lo"]

    @pytest.mark.asyncio
    async def test_stream_error_midway(self, gemini, settings):
        gemini.open_stream = AsyncMock(return_value=agen(["Hel"], error=RuntimeError("stream reset")))
        service = ChatService(gemini, settings)

        fragments = await collect(service.stream_chat("Hi"))

        assert fragments == ["Hel", CHAT_ERROR_PREAMBLE + "stream reset"]

    @pytest.mark.asyncio
    async def test_stream_fails_to_start(self, gemini, settings):
        gemini.open_stream = AsyncMock(side_effect=Exception("429 RESOURCE_EXHAUSTED"))
        service = ChatService(gemini, settings)

        fragments = await collect(service.stream_chat("Hi"))

        assert fragments == [CHAT_ERROR_PREAMBLE + QUOTA_EXCEEDED_MESSAGE]


def test_check_health(gemini, settings):
    health = ChatService(gemini, settings).check_health()

    assert health['status'] == 'healthy'
    assert health['service'] == 'Google Gen AI'
    assert health['model'] == 'gemini-2.5-flash'
