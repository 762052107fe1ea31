"""Database models."""

from .user import User
from .folder import Folder
from .document import Document

__all__ = ["User", "Folder", "Document"]
