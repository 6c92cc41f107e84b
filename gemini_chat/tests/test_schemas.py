"""
Unit tests for Pydantic schemas.
"""
import pytest
from pydantic import ValidationError

from gemini_chat.models.schemas import (
    ChatRequest,
    ChatResponse,
    HealthCheckResponse,
    ModelInfo,
)


class TestChatRequest:
    """Tests for ChatRequest schema."""

    def test_minimal_request(self):
        """Every field is optional."""
        req = ChatRequest()
        assert req.message is None
        assert req.temperature is None
        assert req.max_tokens is None

    def test_camel_case_body(self):
        """maxTokens is accepted as sent by clients."""
        req = ChatRequest.model_validate({
            "message": "Write a haiku",
            "temperature": 0.3,
            "maxTokens": 128,
        })
        assert req.message == "Write a haiku"
        assert req.temperature == 0.3
        assert req.max_tokens == 128

    def test_snake_case_accepted(self):
        req = ChatRequest(message="test", max_tokens=64)
        assert req.max_tokens == 64

    def test_out_of_range_values_are_left_to_the_provider(self):
        """Bounds are enforced by Gemini, so they are not rejected here."""
        req = ChatRequest.model_validate({"message": "test", "temperature": 3.0, "maxTokens": 0})
        assert req.temperature == 3.0
        assert req.max_tokens == 0

    def test_request_is_immutable(self):
        req = ChatRequest(message="hello")
        with pytest.raises(ValidationError):
            req.message = "changed"


class TestChatResponse:
    """Tests for ChatResponse schema."""

    def test_serializes_with_wire_names_and_omits_none(self):
        resp = ChatResponse(
            text="Hello!",
            model="gemini-2.5-flash",
            response_time_ms=42,
        )
        data = resp.model_dump(by_alias=True, exclude_none=True)

        assert data == {
            "response": "Hello!",
            "model": "gemini-2.5-flash",
            "responseTimeMs": 42,
        }

    def test_full_response(self):
        resp = ChatResponse(
            text="Answer",
            model="gemini-2.5-flash",
            tokens_used=15,
            prompt_tokens=10,
            completion_tokens=5,
            response_time_ms=120,
            finish_reason="STOP",
        )
        data = resp.model_dump(by_alias=True)
        assert data["tokensUsed"] == 15
        assert data["promptTokens"] == 10
        assert data["completionTokens"] == 5
        assert data["finishReason"] == "STOP"

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError):
            ChatResponse(text="x", model="m", response_time_ms=-1)


class TestModelInfo:
    """Tests for ModelInfo schema."""

    def test_defaults(self):
        info = ModelInfo(name="models/gemini-2.5-flash")
        assert info.display_name == "N/A"
        assert info.description == "N/A"
        assert info.supported_methods == []
        assert info.input_token_limit == 0
        assert info.output_token_limit == 0

    def test_wire_names(self):
        info = ModelInfo(
            name="models/gemini-2.5-flash",
            display_name="Gemini 2.5 Flash",
            supported_methods=["generateContent"],
            input_token_limit=1048576,
            output_token_limit=65536,
        )
        data = info.model_dump(by_alias=True)
        assert data["displayName"] == "Gemini 2.5 Flash"
        assert data["supportedMethods"] == ["generateContent"]
        assert data["inputTokenLimit"] == 1048576
        assert data["outputTokenLimit"] == 65536


class TestHealthCheckResponse:
    """Tests for HealthCheckResponse schema."""

    def test_health_check_response(self):
        resp = HealthCheckResponse(
            status="healthy",
            service="Google Gen AI",
            model="gemini-2.5-flash"
        )
        assert resp.status == "healthy"
        assert resp.model == "gemini-2.5-flash"
