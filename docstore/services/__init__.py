"""Business logic services."""

from .user_service import UserService
from .folder_service import FolderService
from .document_service import DocumentService

__all__ = ["UserService", "FolderService", "DocumentService"]
