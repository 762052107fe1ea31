"""Columns and hooks shared by every entity table."""

from sqlalchemy import Column, DateTime, Uuid, event
from sqlalchemy.sql import func

from ..core.identity import assign_missing_id


class EntityMixin:
    """Primary key, store-assigned timestamps, and soft-delete marker."""

    # Assigned by assign_missing_id just before the first INSERT.
    id = Column(Uuid, primary_key=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Soft delete (NULL = active, timestamp = deleted)
    deleted_at = Column(DateTime(timezone=True), nullable=True, default=None, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


event.listen(EntityMixin, "before_insert", assign_missing_id, propagate=True)
