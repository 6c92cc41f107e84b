"""
Dependency injection for the gateway.

One GeminiClient per process, shared by both services. The SDK client is safe
to reuse across requests; each uvicorn worker builds its own.
"""
import logging
from typing import Optional

from .config import settings
from .services.chat_service import ChatService
from .services.gemini_client import GeminiClient
from .services.model_discovery_service import ModelDiscoveryService

_logger = logging.getLogger(__name__)

# Global Singleton Instances
_gemini_client: Optional[GeminiClient] = None
_chat_service: Optional[ChatService] = None
_model_discovery_service: Optional[ModelDiscoveryService] = None


def get_gemini_client() -> GeminiClient:
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient(settings)
        _logger.info("Initialized global GeminiClient (Singleton).")
    return _gemini_client


def get_chat_service() -> ChatService:
    """
    Dependency injection for chat service.

    Returns:
        ChatService instance
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService(get_gemini_client(), settings)
        _logger.info("Initialized global ChatService (Singleton).")
    return _chat_service


def get_model_discovery_service() -> ModelDiscoveryService:
    """
    Dependency injection for model discovery service.

    Returns:
        ModelDiscoveryService instance
    """
    global _model_discovery_service
    if _model_discovery_service is None:
        _model_discovery_service = ModelDiscoveryService(get_gemini_client(), settings)
        _logger.info("Initialized global ModelDiscoveryService (Singleton).")
    return _model_discovery_service
