"""Pydantic schemas for API validation."""

from .user import UserCreate, UserUpdate, UserResponse
from .folder import FolderCreate, FolderUpdate, FolderResponse
from .document import DocumentCreate, DocumentUpdate, DocumentResponse

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
]
