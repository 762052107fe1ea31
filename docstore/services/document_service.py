"""Document lifecycle: owner and folder must agree."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..models import Document
from ..repositories import DocumentRepository, FolderRepository, UserRepository
from ..schemas.document import DocumentCreate, DocumentUpdate
from . import integrity
from .base import ResourceService
from .query_filters import DOCUMENT_FILTERS

logger = logging.getLogger(__name__)


class DocumentService(ResourceService[Document, DocumentCreate, DocumentUpdate]):
    """Business logic for documents.

    A document filed in a folder always has the same owner as that folder.
    The owner is set once at creation; updates can move the document
    between the owner's folders but never change who owns it.
    """

    filter_specs = DOCUMENT_FILTERS

    def __init__(self, db: Session):
        super().__init__(db)
        self.repo = DocumentRepository(db)
        self.users = UserRepository(db)
        self.folders = FolderRepository(db)

    def create(self, data: DocumentCreate) -> Document:
        logger.info(
            "Creating document",
            extra={"title": data.title, "user_id": str(data.user_id), "folder_id": _str(data.folder_id)},
        )
        integrity.validate_user_exists(self.users, data.user_id)
        if data.folder_id is not None:
            integrity.validate_folder_ownership(self.folders, data.folder_id, data.user_id)

        document = Document(
            id=data.id,
            title=data.title,
            content=data.content,
            user_id=data.user_id,
            folder_id=data.folder_id,
        )
        return self._persist_new(document)

    def update(self, raw_id: str, data: DocumentUpdate) -> Document:
        existing = self.get(raw_id)
        logger.info(
            "Updating document",
            extra={"id": str(existing.id), "title": data.title, "folder_id": _str(data.folder_id)},
        )

        # Checked against the stored owner, not the one in the payload.
        if data.folder_id is not None:
            integrity.validate_folder_ownership(self.folders, data.folder_id, existing.user_id)

        data = data.model_copy(update={"user_id": existing.user_id})
        return self._persist_changes(
            existing,
            {
                "title": data.title,
                "content": data.content,
                "folder_id": data.folder_id,
                "user_id": data.user_id,
            },
        )


def _str(value) -> Optional[str]:
    return str(value) if value is not None else None
