"""API routes."""

from .users import router as users_router
from .folders import router as folders_router
from .documents import router as documents_router

__all__ = [
    "users_router",
    "folders_router",
    "documents_router",
]
