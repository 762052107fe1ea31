"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from ..database import Base
from .base import EntityMixin


class User(EntityMixin, Base):
    """Account that owns folders and documents.

    username and email are unique across all rows, soft-deleted ones
    included, so a deleted user's name cannot be reused.
    """

    __tablename__ = "users"

    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)

    folders = relationship("Folder", back_populates="owner", lazy="select")
    documents = relationship("Document", back_populates="owner", lazy="select")
