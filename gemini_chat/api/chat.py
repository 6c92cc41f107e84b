"""
API routes for chat.
"""
import logging
from contextlib import aclosing
from typing import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from ..config import settings
from ..deps import get_chat_service
from ..models.schemas import ChatAnalysis, ChatRequest, ChatResponse, HealthCheckResponse
from ..services.chat_service import ChatService
from ..services.normalizer import analyze

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["AI Chat"])


def sse_pack(fragment: str) -> str:
    # One SSE event per fragment; embedded newlines need their own data: line
    lines = fragment.split("\n")
    return "".join(f"data: {line}\n" for line in lines) + "\n"


async def sse_stream(fragments: AsyncIterator[str]) -> AsyncIterator[str]:
    # Closing this stream (client disconnect) closes the provider stream too
    async with aclosing(fragments):
        async for fragment in fragments:
            yield sse_pack(fragment)


@router.get("", response_model=ChatResponse, response_model_exclude_none=True)
async def simple_chat(
    message: str = Query(..., description="User message"),
    service: ChatService = Depends(get_chat_service),
):
    """
    Send a message with default options.

    Upstream failures still answer 200; the response text describes the error.
    """
    logger.info(f"GET /api/chat - message: {message}")
    return await service.simple_chat(message)


@router.post("", response_model=ChatResponse, response_model_exclude_none=True)
async def custom_chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
):
    """Send a message with optional temperature and maxTokens."""
    logger.info(f"POST /api/chat - request: {request}")
    return await service.custom_chat(request)


@router.get("/stream")
async def stream_chat(
    message: str = Query(..., description="User message"),
    service: ChatService = Depends(get_chat_service),
):
    """
    Stream the response as server-sent events.

    Errors arrive in-band as the last event; the connection is never aborted.
    """
    logger.info(f"GET /api/chat/stream - message: {message}")
    return StreamingResponse(
        sse_stream(service.stream_chat(message)),
        media_type="text/event-stream",
    )


@router.get("/analyze", response_model=ChatAnalysis)
async def analyze_chat(
    message: str = Query(..., description="User message"),
    service: ChatService = Depends(get_chat_service),
):
    """Chat once and report token usage, estimated cost and throughput."""
    logger.info(f"GET /api/chat/analyze - message: {message}")
    response = await service.simple_chat(message)
    return analyze(response, settings.COST_PER_1K_TOKENS)


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(service: ChatService = Depends(get_chat_service)):
    """Check the health status of the chat service."""
    try:
        return HealthCheckResponse(**service.check_health())
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Service unhealthy: {str(e)}"
        )
