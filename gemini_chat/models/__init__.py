"""
Data models and schemas for the chat gateway.
"""
from .schemas import (
    ChatRequest,
    ChatResponse,
    ChatAnalysis,
    ModelInfo,
    ModelAvailability,
    ModelStats,
    ErrorResponse,
    HealthCheckResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ChatAnalysis",
    "ModelInfo",
    "ModelAvailability",
    "ModelStats",
    "ErrorResponse",
    "HealthCheckResponse",
]
