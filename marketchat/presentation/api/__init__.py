"""
API Routers - FastAPI endpoint definitions.
"""

from marketchat.presentation.api.chat import router as chat_router
from marketchat.presentation.api.likes import router as likes_router
from marketchat.presentation.api.metrics import router as metrics_router

__all__ = [
    "chat_router",
    "likes_router",
    "metrics_router",
]
