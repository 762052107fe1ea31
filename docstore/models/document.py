"""Document model."""

from sqlalchemy import Column, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import relationship

from ..database import Base
from .base import EntityMixin


class Document(EntityMixin, Base):
    """Main documents table."""

    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_user_id", "user_id"),
        Index("ix_documents_folder_id", "folder_id"),
    )

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")

    # Fixed at creation; updates restore it from the stored row.
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)

    # NULL = not filed in any folder. When set, the folder has the same owner.
    folder_id = Column(Uuid, ForeignKey("folders.id"), nullable=True)

    owner = relationship("User", back_populates="documents")
    folder = relationship("Folder", back_populates="documents")
