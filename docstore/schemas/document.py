"""Document schemas."""

from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
import uuid


class DocumentBase(BaseModel):
    """Base document schema."""
    title: str
    content: str = ""
    folder_id: Optional[uuid.UUID] = None  # None = not in any folder

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Document title cannot be empty")
        return v


class DocumentCreate(DocumentBase):
    """Schema for creating a document."""
    id: Optional[uuid.UUID] = None
    user_id: uuid.UUID

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Meeting notes",
                    "content": "Agenda:\n- budget\n- hiring",
                    "user_id": "3f0c3b8e-2d1a-4a57-9a55-0a3a0d3b6d11",
                    "folder_id": None,
                }
            ]
        }
    }


class DocumentUpdate(DocumentBase):
    """Full replacement of a document's mutable fields.

    user_id is accepted for wire compatibility but never applied.
    """
    user_id: Optional[uuid.UUID] = None


class DocumentResponse(DocumentBase):
    """Document in API responses."""
    id: uuid.UUID
    user_id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
