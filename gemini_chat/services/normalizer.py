"""
Maps provider results onto the local response contract and computes the
derived metrics reported by /api/chat/analyze.
"""
from typing import Any, List, Optional

from ..models.schemas import (
    ChatAnalysis,
    ChatResponse,
    ModelInfo,
    PerformanceAnalysis,
    UsageAnalysis,
)
from .errors import classify_chat_error
from .gemini_client import Completion

DEFAULT_COST_PER_1K_TOKENS = 0.00025


def to_chat_response(completion: Completion, model: str, elapsed_ms: int) -> ChatResponse:
    usage = completion.usage
    return ChatResponse(
        text=completion.text,
        model=model,
        tokens_used=usage.total_tokens if usage else None,
        prompt_tokens=usage.prompt_tokens if usage else None,
        completion_tokens=usage.completion_tokens if usage else None,
        response_time_ms=elapsed_ms,
        finish_reason=completion.finish_reason,
    )


def to_error_response(error: BaseException, model: str, elapsed_ms: int) -> ChatResponse:
    """A failed call still yields a ChatResponse; the text carries the error."""
    return ChatResponse(
        text=classify_chat_error(error),
        model=model,
        tokens_used=0,
        response_time_ms=elapsed_ms,
    )


def to_model_info(model: Any) -> ModelInfo:
    """
    Convert an SDK ``types.Model`` into ModelInfo.

    The SDK leaves unset fields as None; those become "unknown", "N/A", an
    empty method list or 0.
    """
    supported: Optional[List[str]] = getattr(model, 'supported_actions', None)
    return ModelInfo(
        name=getattr(model, 'name', None) or "unknown",
        display_name=getattr(model, 'display_name', None) or "N/A",
        description=getattr(model, 'description', None) or "N/A",
        supported_methods=list(supported or []),
        input_token_limit=getattr(model, 'input_token_limit', None) or 0,
        output_token_limit=getattr(model, 'output_token_limit', None) or 0,
    )


def estimate_cost(tokens_used: Optional[int], cost_per_1k: float = DEFAULT_COST_PER_1K_TOKENS) -> str:
    if tokens_used is None:
        return "N/A"
    return f"${(tokens_used / 1000.0) * cost_per_1k:.6f}"


def tokens_per_second(tokens_used: Optional[int], response_time_ms: Optional[int]) -> float:
    if tokens_used is None or not response_time_ms or response_time_ms <= 0:
        return 0.0
    return (tokens_used * 1000.0) / response_time_ms


def analyze(response: ChatResponse, cost_per_1k: float = DEFAULT_COST_PER_1K_TOKENS) -> ChatAnalysis:
    """Build the nested usage/performance report for a finished chat call."""
    return ChatAnalysis(
        response=response.text,
        model=response.model,
        usage=UsageAnalysis(
            total_tokens=response.tokens_used or 0,
            prompt_tokens=response.prompt_tokens or 0,
            completion_tokens=response.completion_tokens or 0,
            estimated_cost=estimate_cost(response.tokens_used, cost_per_1k),
        ),
        performance=PerformanceAnalysis(
            response_time_ms=response.response_time_ms,
            tokens_per_second=tokens_per_second(response.tokens_used, response.response_time_ms),
        ),
    )
