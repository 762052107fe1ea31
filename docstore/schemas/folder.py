"""Folder schemas."""

from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
import uuid


class FolderBase(BaseModel):
    """Base folder schema."""
    name: str
    parent_id: Optional[uuid.UUID] = None  # None = root level

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Folder name cannot be empty")
        return v


class FolderCreate(FolderBase):
    """Schema for creating a folder."""
    id: Optional[uuid.UUID] = None
    user_id: uuid.UUID


class FolderUpdate(FolderBase):
    """Full replacement of a folder's mutable fields.

    user_id is accepted for wire compatibility but never applied: the
    stored owner always wins.
    """
    user_id: Optional[uuid.UUID] = None


class FolderResponse(FolderBase):
    """Folder in API responses."""
    id: uuid.UUID
    user_id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
