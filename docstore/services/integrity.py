"""Integrity checks for the user/folder/document hierarchy.

Each check either returns (the entity it had to load, if any) or raises
a typed DocstoreException. None of them write. Services compose them in a
fixed order: existence, then ownership, then structure, so the reported
error is deterministic when several rules are broken at once.
"""

import uuid
from typing import Optional

from ..exceptions import (
    CircularReferenceError,
    FolderHasChildrenError,
    FolderHasDocumentsError,
    OwnershipMismatchError,
    SelfReferenceError,
)
from ..models import Folder, User
from ..repositories import DocumentRepository, FolderRepository, UserRepository


def validate_user_exists(users: UserRepository, user_id: uuid.UUID) -> User:
    """Raises UserNotFoundError unless an active user has this id."""
    return users.get_by_id(user_id)


def validate_folder_exists(folders: FolderRepository, folder_id: uuid.UUID) -> Folder:
    """Raises FolderNotFoundError unless an active folder has this id."""
    return folders.get_by_id(folder_id)


def validate_folder_ownership(
    folders: FolderRepository, folder_id: uuid.UUID, expected_owner_id: uuid.UUID
) -> Folder:
    """The folder must exist and belong to *expected_owner_id*."""
    folder = validate_folder_exists(folders, folder_id)
    if folder.user_id != expected_owner_id:
        raise OwnershipMismatchError(folder_id, folder.user_id, expected_owner_id)
    return folder


def validate_no_self_parent(folder_id: uuid.UUID, parent_id: Optional[uuid.UUID]) -> None:
    if parent_id is not None and parent_id == folder_id:
        raise SelfReferenceError(folder_id)


def validate_no_cycle(folders: FolderRepository, folder_id: uuid.UUID, parent_id: uuid.UUID) -> None:
    """Reject re-parenting a folder under one of its own descendants.

    Walks up from the proposed parent; reaching *folder_id* means the move
    would close a loop. A pre-existing loop above the parent stops the walk
    instead of spinning forever.
    """
    seen = set()
    current: Optional[uuid.UUID] = parent_id
    while current is not None and current not in seen:
        if current == folder_id:
            raise CircularReferenceError(folder_id, parent_id)
        seen.add(current)
        ancestor = folders.find_by_id(current)
        current = ancestor.parent_id if ancestor is not None else None


def validate_folder_deletable(
    folders: FolderRepository, documents: DocumentRepository, folder_id: uuid.UUID
) -> None:
    """A folder may only be deleted once it has no subfolders and no documents.

    Subfolders are checked first.
    """
    child_count = folders.count_children(folder_id)
    if child_count > 0:
        raise FolderHasChildrenError(folder_id, child_count)

    document_count = documents.count_in_folder(folder_id)
    if document_count > 0:
        raise FolderHasDocumentsError(folder_id, document_count)
