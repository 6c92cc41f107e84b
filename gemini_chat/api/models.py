"""
API routes for model discovery.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from ..deps import get_model_discovery_service
from ..models.schemas import ModelAvailability, ModelInfo, ModelStats
from ..services.errors import ModelNotFoundError
from ..services.model_discovery_service import ModelDiscoveryService, filter_chat_models

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/models", tags=["Models"])


def _server_error() -> Response:
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", response_model=List[ModelInfo])
async def list_all_models(service: ModelDiscoveryService = Depends(get_model_discovery_service)):
    """List every model in the catalog."""
    logger.info("GET /api/models - listing all models")
    try:
        return await service.list_available_models()
    except Exception as e:
        logger.error(f"Error listing models: {str(e)}")
        return _server_error()


@router.get("/chat", response_model=List[ModelInfo])
async def list_chat_models(service: ModelDiscoveryService = Depends(get_model_discovery_service)):
    """List only the models that support generateContent."""
    logger.info("GET /api/models/chat - listing chat models")
    try:
        return await service.list_chat_models()
    except Exception as e:
        logger.error(f"Error listing chat models: {str(e)}")
        return _server_error()


@router.get("/stats", response_model=ModelStats)
async def get_models_stats(service: ModelDiscoveryService = Depends(get_model_discovery_service)):
    """Count chat and non-chat models and list every model name."""
    logger.info("GET /api/models/stats - computing model statistics")
    try:
        all_models = await service.list_available_models()
    except Exception as e:
        logger.error(f"Error computing model statistics: {str(e)}")
        return _server_error()

    chat_models = filter_chat_models(all_models)
    return ModelStats(
        total_models=len(all_models),
        chat_models=len(chat_models),
        other_models=len(all_models) - len(chat_models),
        models=[model.name for model in all_models],
    )


@router.get("/check/{model_name}", response_model=ModelAvailability)
async def check_model_availability(
    model_name: str,
    service: ModelDiscoveryService = Depends(get_model_discovery_service),
):
    """
    Check whether a model is available.

    Matches on substring, so "gemini" is available whenever any Gemini model is.
    """
    logger.info(f"GET /api/models/check/{model_name} - checking availability")
    try:
        available = await service.is_model_available(model_name)
    except Exception as e:
        logger.error(f"Error checking model availability: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"modelName": model_name, "available": False, "error": str(e)},
        )

    return ModelAvailability(
        model_name=model_name,
        available=available,
        message="Model available" if available else "Model not available or not found",
    )


@router.get("/{model_name}", response_model=ModelInfo)
async def get_model_info(
    model_name: str,
    service: ModelDiscoveryService = Depends(get_model_discovery_service),
):
    """Get information about one model; "models/" is prefixed when missing."""
    logger.info(f"GET /api/models/{model_name} - fetching model information")
    try:
        return await service.get_model_info(model_name)
    except ModelNotFoundError:
        logger.error(f"Model not found: {model_name}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        logger.error(f"Error fetching model information: {str(e)}")
        return _server_error()
