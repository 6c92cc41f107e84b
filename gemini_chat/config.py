"""
Configuration for the Gemini chat gateway.

Values are read from the environment and from a ``.env`` file in the working
directory. API key mode is the default; set GOOGLE_GENAI_USE_VERTEXAI=True to
authenticate through Vertex AI with Application Default Credentials instead.

Reference: https://ai.google.dev/gemini-api/docs/api-key
"""
import warnings
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PORT: int = 8080
    ENVIRONMENT: str = "dev"
    # Comma separated, "*" allows every origin
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # ============================================
    # Google Gen AI Authentication
    # ============================================
    GEMINI_API_KEY: Optional[str] = None
    GOOGLE_GENAI_USE_VERTEXAI: bool = False
    GOOGLE_CLOUD_PROJECT: Optional[str] = None
    GOOGLE_CLOUD_LOCATION: str = "us-central1"

    # ============================================
    # Model Configuration
    # ============================================
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GENAI_TEMPERATURE: float = 0.7
    GENAI_MAX_OUTPUT_TOKENS: int = 2048

    # Catalog page size used when listing models
    MODEL_LIST_PAGE_SIZE: int = 100

    # Reference price used by /api/chat/analyze, USD per 1K tokens
    COST_PER_1K_TOKENS: float = 0.00025

    @property
    def cors_origins(self) -> List[str]:
        return [s.strip() for s in self.CORS_ORIGINS.split(",") if s.strip()]

    def validate_credentials(self, strict: bool = True) -> bool:
        """
        Check that the credentials needed by the selected auth mode are set.

        Args:
            strict: If True, raise error on missing config. If False, only warn.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If required configuration is missing and strict=True
        """
        errors = []

        if self.GOOGLE_GENAI_USE_VERTEXAI:
            if not self.GOOGLE_CLOUD_PROJECT:
                errors.append(
                    "GOOGLE_CLOUD_PROJECT is required when GOOGLE_GENAI_USE_VERTEXAI=True. "
                    "Example: export GOOGLE_CLOUD_PROJECT=YOUR_PROJECT"
                )
            if not self.GOOGLE_CLOUD_LOCATION:
                errors.append(
                    "GOOGLE_CLOUD_LOCATION is required when GOOGLE_GENAI_USE_VERTEXAI=True. "
                    "Example: export GOOGLE_CLOUD_LOCATION=us-central1"
                )
        elif not self.GEMINI_API_KEY:
            errors.append(
                "GEMINI_API_KEY environment variable is required. "
                "Example: export GEMINI_API_KEY=your-api-key"
            )

        if errors:
            error_msg = "\n".join([f"  - {err}" for err in errors])
            full_msg = f"Configuration validation failed:\n{error_msg}"

            if strict:
                raise ValueError(full_msg)
            warnings.warn(full_msg)
            return False

        return True

    def get_config_summary(self) -> dict:
        """Get a summary of current configuration (never includes the key itself)."""
        return {
            'use_vertexai': self.GOOGLE_GENAI_USE_VERTEXAI,
            'api_key_configured': bool(self.GEMINI_API_KEY),
            'project_id': self.GOOGLE_CLOUD_PROJECT or '(not set)',
            'location': self.GOOGLE_CLOUD_LOCATION,
            'model': self.GEMINI_MODEL,
            'temperature': self.GENAI_TEMPERATURE,
            'max_tokens': self.GENAI_MAX_OUTPUT_TOKENS,
        }


settings = Settings()
