"""User schemas."""

from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
import uuid


class UserBase(BaseModel):
    """Base user schema."""
    username: str
    email: str

    @field_validator('username', 'email')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class UserCreate(UserBase):
    """Schema for creating a user. id may be pre-set (seeding, migrations)."""
    id: Optional[uuid.UUID] = None


class UserUpdate(UserBase):
    """Full replacement of a user's mutable fields."""
    pass


class UserResponse(UserBase):
    """User in API responses. deleted_at is set for soft-deleted users in listings."""
    id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
