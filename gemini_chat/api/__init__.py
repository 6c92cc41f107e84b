"""
API routes; mounted under /api in main.py.
"""
from fastapi import APIRouter

from .chat import router as chat_router
from .models import router as models_router

api_router = APIRouter()
api_router.include_router(chat_router)
api_router.include_router(models_router)

__all__ = ["api_router"]
