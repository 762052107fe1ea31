"""Repository for folders."""

import uuid

from ..exceptions import FolderNotFoundError
from ..models import Folder
from .base import BaseRepository, Predicate


class FolderRepository(BaseRepository[Folder]):
    """Data access layer for folders."""

    model_class = Folder
    entity_name = "folder"
    not_found_error = FolderNotFoundError

    def count_children(self, folder_id: uuid.UUID) -> int:
        return self.count([Predicate.equals("parent_id", folder_id)])
