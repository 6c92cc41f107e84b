"""
Pydantic schemas for the chat and model discovery API.

Python attributes are snake_case; the JSON contract uses camelCase aliases.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict


class ApiModel(BaseModel):
    """Base for every wire schema: immutable, camelCase on the wire."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
    )


# ============================================
# Chat Schemas
# ============================================

class ChatRequest(ApiModel):
    """Request model for POST /api/chat."""
    message: Optional[str] = Field(
        default=None,
        description="User message to send to the AI"
    )
    temperature: Optional[float] = Field(
        default=None,
        description="Controls randomness in generation (default 0.7); range is checked by the provider"
    )
    max_tokens: Optional[int] = Field(
        default=None,
        alias="maxTokens",
        description="Maximum number of tokens to generate (default 2048)"
    )


class ChatResponse(ApiModel):
    """Response model for the synchronous chat endpoints."""
    text: str = Field(..., alias="response", description="AI-generated response or error description")
    model: str = Field(..., description="Model used for generation")
    tokens_used: Optional[int] = Field(default=None, alias="tokensUsed", ge=0)
    prompt_tokens: Optional[int] = Field(default=None, alias="promptTokens", ge=0)
    completion_tokens: Optional[int] = Field(default=None, alias="completionTokens", ge=0)
    response_time_ms: int = Field(..., alias="responseTimeMs", ge=0)
    finish_reason: Optional[str] = Field(
        default=None,
        alias="finishReason",
        description="Reason why generation finished"
    )


class UsageAnalysis(ApiModel):
    total_tokens: int = Field(..., alias="totalTokens")
    prompt_tokens: int = Field(..., alias="promptTokens")
    completion_tokens: int = Field(..., alias="completionTokens")
    estimated_cost: str = Field(..., alias="estimatedCost", description="e.g. $0.000500, or N/A")


class PerformanceAnalysis(ApiModel):
    response_time_ms: int = Field(..., alias="responseTimeMs")
    tokens_per_second: float = Field(..., alias="tokensPerSecond")


class ChatAnalysis(ApiModel):
    """Response model for GET /api/chat/analyze."""
    response: str
    model: str
    usage: UsageAnalysis
    performance: PerformanceAnalysis


# ============================================
# Model Discovery Schemas
# ============================================

class ModelInfo(ApiModel):
    """A single entry of the provider's model catalog."""
    name: str = Field(..., description="Catalog identifier, e.g. models/gemini-2.5-flash")
    display_name: str = Field(default="N/A", alias="displayName")
    description: str = Field(default="N/A")
    supported_methods: List[str] = Field(default_factory=list, alias="supportedMethods")
    input_token_limit: int = Field(default=0, alias="inputTokenLimit", ge=0)
    output_token_limit: int = Field(default=0, alias="outputTokenLimit", ge=0)


class ModelAvailability(ApiModel):
    model_name: str = Field(..., alias="modelName")
    available: bool
    message: str


class ModelStats(ApiModel):
    total_models: int = Field(..., alias="totalModels")
    chat_models: int = Field(..., alias="chatModels")
    other_models: int = Field(..., alias="otherModels")
    models: List[str]


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    model_config = ConfigDict(protected_namespaces=())

    status: str
    service: str
    model: Union[str, None] = None
