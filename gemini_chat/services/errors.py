"""
Error types and the chat error classifier.
"""
from typing import Optional

CHAT_ERROR_PREAMBLE = "Error communicating with Gemini: "
QUOTA_EXCEEDED_MESSAGE = "Quota limit exceeded. Please wait a few minutes."
MODEL_NOT_FOUND_MESSAGE = "Model not found. Check the configuration."
UNKNOWN_ERROR_MESSAGE = "unknown error"


class ModelDiscoveryError(Exception):
    """Raised when the model catalog cannot be listed or queried."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ModelNotFoundError(ModelDiscoveryError):
    """The provider answered a model lookup with 404."""


def classify_chat_error(error: BaseException) -> str:
    """
    Turn a provider failure into the text returned to chat clients.

    Matching is on the raw message: "429" means the quota is exhausted and
    "404" means the configured model does not exist. Anything else is passed
    through verbatim after the preamble.
    """
    raw = str(error)
    if "429" in raw:
        detail = QUOTA_EXCEEDED_MESSAGE
    elif "404" in raw:
        detail = MODEL_NOT_FOUND_MESSAGE
    else:
        detail = raw or UNKNOWN_ERROR_MESSAGE
    return CHAT_ERROR_PREAMBLE + detail
