"""Repository for documents."""

import uuid

from ..exceptions import DocumentNotFoundError
from ..models import Document
from .base import BaseRepository, Predicate


class DocumentRepository(BaseRepository[Document]):
    """Data access layer for documents."""

    model_class = Document
    entity_name = "document"
    not_found_error = DocumentNotFoundError

    def count_in_folder(self, folder_id: uuid.UUID) -> int:
        return self.count([Predicate.equals("folder_id", folder_id)])
