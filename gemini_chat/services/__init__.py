"""
Service layer: Gemini client, chat orchestration and model discovery.
"""
from .chat_service import ChatService
from .errors import ModelDiscoveryError, ModelNotFoundError, classify_chat_error
from .gemini_client import Completion, GeminiClient, TokenUsage
from .model_discovery_service import ModelDiscoveryService

__all__ = [
    "ChatService",
    "Completion",
    "GeminiClient",
    "ModelDiscoveryError",
    "ModelDiscoveryService",
    "ModelNotFoundError",
    "TokenUsage",
    "classify_chat_error",
]
