"""
Model catalog queries against the Gemini API.

Nothing is cached: every call reflects the provider's current catalog.
"""
import logging
from typing import List

from google.genai import errors as genai_errors

from ..config import Settings
from ..models.schemas import ModelInfo
from .errors import ModelDiscoveryError, ModelNotFoundError
from .gemini_client import GeminiClient
from .normalizer import to_model_info

logger = logging.getLogger(__name__)

CHAT_METHOD = "generateContent"
MODEL_NAME_PREFIX = "models/"


def normalize_model_name(name: str) -> str:
    """gemini-2.5-flash -> models/gemini-2.5-flash; canonical names pass through."""
    return name if name.startswith(MODEL_NAME_PREFIX) else MODEL_NAME_PREFIX + name


def filter_chat_models(models: List[ModelInfo]) -> List[ModelInfo]:
    return [model for model in models if CHAT_METHOD in model.supported_methods]


class ModelDiscoveryService:
    """Lists and looks up models in the provider catalog."""

    def __init__(self, client: GeminiClient, settings: Settings):
        self.client = client
        self.page_size = settings.MODEL_LIST_PAGE_SIZE

    async def list_available_models(self) -> List[ModelInfo]:
        """
        Page through the whole catalog.

        Raises:
            ModelDiscoveryError: on any provider or unexpected error
        """
        logger.info("Listing available models...")
        try:
            models = []
            async for raw in self.client.list_models(page_size=self.page_size):
                info = to_model_info(raw)
                logger.debug(f"Model found: {info.name} - {info.display_name}")
                models.append(info)
        except genai_errors.APIError as e:
            logger.error(f"Google GenAI error while listing models: {str(e)}", exc_info=True)
            raise ModelDiscoveryError("Error fetching models from Google GenAI", e) from e
        except Exception as e:
            logger.error(f"Unexpected error while listing models: {str(e)}", exc_info=True)
            raise ModelDiscoveryError("Unexpected error fetching available models", e) from e

        logger.info(f"Found {len(models)} models")
        return models

    async def list_chat_models(self) -> List[ModelInfo]:
        """Models supporting generateContent."""
        return filter_chat_models(await self.list_available_models())

    async def is_model_available(self, model_name: str) -> bool:
        """
        True if any catalog name contains ``model_name``.

        This is a substring match, not an exact one: "gemini-2.5" also matches
        "models/gemini-2.5-pro-experimental". Discovery errors count as
        unavailable.
        """
        try:
            models = await self.list_available_models()
        except ModelDiscoveryError as e:
            logger.error(f"Error checking model {model_name}: {e.message}")
            return False
        return any(model_name in model.name for model in models)

    async def get_model_info(self, model_name: str) -> ModelInfo:
        """
        Look up one model; bare names are prefixed with "models/".

        Raises:
            ModelNotFoundError: the provider does not know the model
            ModelDiscoveryError: any other failure
        """
        full_name = normalize_model_name(model_name)
        try:
            model = await self.client.get_model(full_name)
        except genai_errors.APIError as e:
            logger.error(f"Google GenAI error fetching model {full_name}: {str(e)}")
            if e.code == 404:
                raise ModelNotFoundError(f"Model not found: {full_name}", e) from e
            raise ModelDiscoveryError(f"Error fetching model information: {full_name}", e) from e
        except Exception as e:
            logger.error(f"Unexpected error fetching model {full_name}: {str(e)}", exc_info=True)
            raise ModelDiscoveryError(f"Error fetching model information: {full_name}", e) from e

        return to_model_info(model)
