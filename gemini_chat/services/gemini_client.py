"""
Thin async wrapper over the Google Gen AI SDK.

One GeminiClient is built per process and shared by the chat and model
discovery services. Provider errors are not caught here.
"""
import logging
from contextlib import aclosing
from typing import Any, AsyncIterator, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel

from ..config import Settings

logger = logging.getLogger(__name__)


class TokenUsage(BaseModel):
    """Token counts reported alongside a completion."""
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class Completion(BaseModel):
    """Result of a single (non-streaming) generation call."""
    text: str
    usage: Optional[TokenUsage] = None
    finish_reason: Optional[str] = None


def _extract_usage(response: Any) -> Optional[TokenUsage]:
    usage_metadata = getattr(response, 'usage_metadata', None)
    if not usage_metadata:
        return None
    return TokenUsage(
        prompt_tokens=getattr(usage_metadata, 'prompt_token_count', None),
        completion_tokens=getattr(usage_metadata, 'candidates_token_count', None),
        total_tokens=getattr(usage_metadata, 'total_token_count', None),
    )


def _extract_finish_reason(response: Any) -> Optional[str]:
    candidates = getattr(response, 'candidates', None)
    if not candidates:
        return None
    finish_reason = getattr(candidates[0], 'finish_reason', None)
    if finish_reason is None:
        return None
    # FinishReason is an enum in the SDK; tests and older SDKs hand back plain strings
    return getattr(finish_reason, 'name', None) or str(finish_reason)


class GeminiClient:
    """
    Handles all interactions with the Google Gen AI SDK.
    """

    def __init__(self, settings: Settings, client: Optional[genai.Client] = None):
        """
        Args:
            settings: Application settings (credentials and generation defaults)
            client: Pre-built SDK client; built from settings when omitted
        """
        self.settings = settings
        self.model = settings.GEMINI_MODEL
        self.client = client or self._create_client()

    def _create_client(self) -> genai.Client:
        """
        Create the SDK client in API key mode, or Vertex AI mode when enabled.

        Vertex AI mode authenticates with Application Default Credentials.
        """
        try:
            if self.settings.GOOGLE_GENAI_USE_VERTEXAI:
                client = genai.Client(
                    vertexai=True,
                    project=self.settings.GOOGLE_CLOUD_PROJECT,
                    location=self.settings.GOOGLE_CLOUD_LOCATION,
                )
                logger.info(
                    f"Created Vertex AI client - project: {self.settings.GOOGLE_CLOUD_PROJECT}, "
                    f"location: {self.settings.GOOGLE_CLOUD_LOCATION}"
                )
            else:
                client = genai.Client(api_key=self.settings.GEMINI_API_KEY)
                logger.info(
                    f"Created Gemini API client - API key configured: "
                    f"{'yes' if self.settings.GEMINI_API_KEY else 'no'}"
                )
            return client
        except Exception as e:
            logger.error(f"Failed to create GenAI client: {str(e)}")
            raise

    def _build_generation_config(
        self,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> types.GenerateContentConfig:
        """Build generation config, falling back to the configured defaults."""
        return types.GenerateContentConfig(
            temperature=temperature if temperature is not None else self.settings.GENAI_TEMPERATURE,
            max_output_tokens=(
                max_output_tokens if max_output_tokens is not None
                else self.settings.GENAI_MAX_OUTPUT_TOKENS
            ),
        )

    async def generate(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> Completion:
        """
        Run a single completion call.

        Returns:
            Completion with the text, usage metadata (None when the provider
            omits it) and the finish reason of the first candidate
        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self._build_generation_config(temperature, max_output_tokens),
        )

        return Completion(
            text=response.text or "",
            usage=_extract_usage(response),
            finish_reason=_extract_finish_reason(response),
        )

    async def open_stream(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> AsyncIterator[str]:
        """
        Start a streaming completion.

        A failure to start raises from the await; failures after that are
        raised by the returned iterator.
        """
        stream = await self.client.aio.models.generate_content_stream(
            model=self.model,
            contents=prompt,
            config=self._build_generation_config(temperature, max_output_tokens),
        )

        async def fragments() -> AsyncIterator[str]:
            async with aclosing(stream):
                async for chunk in stream:
                    text = getattr(chunk, 'text', None)
                    if text:
                        yield text

        return fragments()

    async def list_models(self, page_size: int = 100) -> AsyncIterator[types.Model]:
        """Iterate the whole model catalog; the pager fetches further pages on demand."""
        pager = await self.client.aio.models.list(
            config=types.ListModelsConfig(page_size=page_size)
        )
        async for model in pager:
            yield model

    async def get_model(self, name: str) -> types.Model:
        """Look up one model by its canonical name (models/...)."""
        return await self.client.aio.models.get(model=name)
