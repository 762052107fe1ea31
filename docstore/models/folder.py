"""Folder model."""

from sqlalchemy import Column, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import relationship

from ..database import Base
from .base import EntityMixin


class Folder(EntityMixin, Base):
    """A named container owned by one user, optionally nested in another folder."""

    __tablename__ = "folders"
    __table_args__ = (
        Index("ix_folders_user_id", "user_id"),
        Index("ix_folders_parent_id", "parent_id"),
    )

    name = Column(String(255), nullable=False)

    # Fixed at creation; updates restore it from the stored row.
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)

    # NULL = root folder
    parent_id = Column(Uuid, ForeignKey("folders.id"), nullable=True)

    owner = relationship("User", back_populates="folders")
    parent = relationship("Folder", remote_side="Folder.id", back_populates="children")
    children = relationship("Folder", back_populates="parent")
    documents = relationship("Document", back_populates="folder")
