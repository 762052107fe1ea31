"""Data access repositories."""

from .base import BaseRepository, EntityStore, Predicate
from .user_repository import UserRepository
from .folder_repository import FolderRepository
from .document_repository import DocumentRepository

__all__ = [
    "BaseRepository",
    "EntityStore",
    "Predicate",
    "UserRepository",
    "FolderRepository",
    "DocumentRepository",
]
