"""
Chat orchestration on top of the Gemini client.

Provider failures never escape this layer: synchronous calls return a
ChatResponse whose text describes the error, streams end with one error
fragment.
"""
import logging
import time
from contextlib import aclosing
from typing import AsyncIterator, Callable, Dict, Optional

from ..config import Settings
from ..models.schemas import ChatRequest, ChatResponse
from .errors import classify_chat_error
from .gemini_client import GeminiClient
from .normalizer import to_chat_response, to_error_response

logger = logging.getLogger(__name__)


class ChatService:
    """Service for single-shot and streaming chat with Gemini."""

    def __init__(
        self,
        client: GeminiClient,
        settings: Settings,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.settings = settings
        self.model = settings.GEMINI_MODEL
        self.clock = clock

    def _elapsed_ms(self, start: float) -> int:
        return int((self.clock() - start) * 1000)

    async def _complete(
        self,
        message: Optional[str],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatResponse:
        start = self.clock()
        try:
            completion = await self.client.generate(
                message or "",
                temperature=temperature,
                max_output_tokens=max_tokens,
            )
        except Exception as e:
            elapsed = self._elapsed_ms(start)
            logger.error(f"Gemini call failed after {elapsed} ms: {str(e)}", exc_info=True)
            return to_error_response(e, self.model, elapsed)

        elapsed = self._elapsed_ms(start)
        if completion.usage:
            logger.info(
                f"Tokens used - Prompt: {completion.usage.prompt_tokens}, "
                f"Completion: {completion.usage.completion_tokens}, "
                f"Total: {completion.usage.total_tokens}"
            )
        logger.info(f"Response received in {elapsed} ms")
        return to_chat_response(completion, self.model, elapsed)

    async def simple_chat(self, message: Optional[str]) -> ChatResponse:
        """
        Send a bare message with the default generation options.

        Args:
            message: User message

        Returns:
            ChatResponse; on failure its text holds the classified error and
            tokens_used is 0
        """
        logger.info(f"Calling Gemini with message: {message}")
        return await self._complete(message)

    async def custom_chat(self, request: ChatRequest) -> ChatResponse:
        """
        Send a message with the caller's temperature / max tokens.

        Unset options fall back to the configured defaults (0.7 / 2048).
        """
        temperature = (
            request.temperature if request.temperature is not None
            else self.settings.GENAI_TEMPERATURE
        )
        max_tokens = (
            request.max_tokens if request.max_tokens is not None
            else self.settings.GENAI_MAX_OUTPUT_TOKENS
        )
        logger.info(f"Calling Gemini with temperature={temperature}, max_tokens={max_tokens}")
        return await self._complete(request.message, temperature, max_tokens)

    async def stream_chat(self, message: Optional[str]) -> AsyncIterator[str]:
        """
        Stream response fragments as they arrive.

        Yields:
            Text fragments. If the stream cannot start, or breaks midway, a
            single error-prefixed fragment is yielded last and the stream ends.
        """
        try:
            fragments = await self.client.open_stream(message or "")
        except Exception as e:
            logger.error(f"Failed to start stream: {str(e)}", exc_info=True)
            yield classify_chat_error(e)
            return

        try:
            async with aclosing(fragments):
                async for fragment in fragments:
                    yield fragment
        except Exception as e:
            logger.error(f"Error in streaming response: {str(e)}", exc_info=True)
            yield classify_chat_error(e)

    def check_health(self) -> Dict[str, str]:
        """Check service health."""
        return {
            'status': 'healthy',
            'service': 'Google Gen AI',
            'model': self.model,
        }
