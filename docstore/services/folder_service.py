"""Folder lifecycle: ownership at creation, re-parenting, and guarded deletes."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.config import settings
from ..models import Folder
from ..repositories import DocumentRepository, FolderRepository, UserRepository
from ..schemas.folder import FolderCreate, FolderUpdate
from . import integrity
from .base import ResourceService
from .query_filters import FOLDER_FILTERS

logger = logging.getLogger(__name__)


class FolderService(ResourceService[Folder, FolderCreate, FolderUpdate]):
    """Business logic for folders.

    The parent of a folder is only required to exist. Whether it must also
    belong to the same user is controlled by ``enforce_parent_ownership``
    (off by default, see ENFORCE_FOLDER_PARENT_OWNERSHIP).
    """

    filter_specs = FOLDER_FILTERS

    def __init__(self, db: Session, enforce_parent_ownership: Optional[bool] = None):
        super().__init__(db)
        self.repo = FolderRepository(db)
        self.users = UserRepository(db)
        self.documents = DocumentRepository(db)
        if enforce_parent_ownership is None:
            enforce_parent_ownership = settings.enforce_folder_parent_ownership
        self.enforce_parent_ownership = enforce_parent_ownership

    def create(self, data: FolderCreate) -> Folder:
        logger.info(
            "Creating folder",
            extra={"folder_name": data.name, "user_id": str(data.user_id), "parent_id": _str(data.parent_id)},
        )
        integrity.validate_user_exists(self.users, data.user_id)
        if data.parent_id is not None:
            self._validate_parent(data.parent_id, data.user_id)

        folder = Folder(id=data.id, name=data.name, user_id=data.user_id, parent_id=data.parent_id)
        return self._persist_new(folder)

    def update(self, raw_id: str, data: FolderUpdate) -> Folder:
        existing = self.get(raw_id)
        logger.info(
            "Updating folder",
            extra={"id": str(existing.id), "folder_name": data.name, "parent_id": _str(data.parent_id)},
        )

        if data.parent_id is not None:
            integrity.validate_no_self_parent(existing.id, data.parent_id)
            self._validate_parent(data.parent_id, existing.user_id)
            integrity.validate_no_cycle(self.repo, existing.id, data.parent_id)

        # Owner is immutable: whatever the caller sent, keep the stored one.
        data = data.model_copy(update={"user_id": existing.user_id})
        return self._persist_changes(
            existing,
            {"name": data.name, "parent_id": data.parent_id, "user_id": data.user_id},
        )

    def _check_deletable(self, entity: Folder) -> None:
        integrity.validate_folder_deletable(self.repo, self.documents, entity.id)

    def _validate_parent(self, parent_id, owner_id) -> None:
        if self.enforce_parent_ownership:
            integrity.validate_folder_ownership(self.repo, parent_id, owner_id)
        else:
            integrity.validate_folder_exists(self.repo, parent_id)


def _str(value) -> Optional[str]:
    return str(value) if value is not None else None
