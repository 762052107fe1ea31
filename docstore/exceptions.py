"""Custom exception hierarchy for Docstore."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Input errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Lookup errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"

    # Hierarchy errors
    OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"
    SELF_REFERENCE = "SELF_REFERENCE"
    CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
    FOLDER_HAS_CHILDREN = "FOLDER_HAS_CHILDREN"
    FOLDER_HAS_DOCUMENTS = "FOLDER_HAS_DOCUMENTS"

    # Store errors
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    DATABASE_ERROR = "DATABASE_ERROR"


class DocstoreException(Exception):
    """
    Base exception for all Docstore errors.

    Provides structured error responses with:
    - Human-readable message
    - Machine-readable error code
    - HTTP status code
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class InvalidArgumentError(DocstoreException):
    """Malformed identifier or filter value."""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[str] = None):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(
            message,
            ErrorCode.INVALID_ARGUMENT,
            status_code=400,
            details=details
        )


class EntityNotFoundError(DocstoreException):
    """Referenced entity does not exist (or has been deleted)."""

    # Set by subclasses.
    entity_name: str
    error_code: ErrorCode

    def __init__(self, entity_id: Any):
        super().__init__(
            f"{self.entity_name} not found: {entity_id}",
            self.error_code,
            status_code=404,
            details={"id": str(entity_id)}
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found in database."""

    entity_name = "User"
    error_code = ErrorCode.USER_NOT_FOUND


class FolderNotFoundError(EntityNotFoundError):
    """Folder not found in database."""

    entity_name = "Folder"
    error_code = ErrorCode.FOLDER_NOT_FOUND


class DocumentNotFoundError(EntityNotFoundError):
    """Document not found in database."""

    entity_name = "Document"
    error_code = ErrorCode.DOCUMENT_NOT_FOUND


class OwnershipMismatchError(DocstoreException):
    """Referenced folder belongs to a different user than the dependent entity."""

    def __init__(self, folder_id: Any, owner_id: Any, expected_owner_id: Any):
        super().__init__(
            "Folder does not belong to the user",
            ErrorCode.OWNERSHIP_MISMATCH,
            status_code=400,
            details={
                "folder_id": str(folder_id),
                "owner_id": str(owner_id),
                "expected_owner_id": str(expected_owner_id),
            }
        )


class SelfReferenceError(DocstoreException):
    """A folder names itself as its own parent."""

    def __init__(self, folder_id: Any):
        super().__init__(
            "Folder cannot be its own parent",
            ErrorCode.SELF_REFERENCE,
            status_code=400,
            details={"folder_id": str(folder_id)}
        )


class CircularReferenceError(DocstoreException):
    """Moving a folder under one of its own descendants."""

    def __init__(self, folder_id: Any, parent_id: Any):
        super().__init__(
            f"Would create circular reference: {folder_id} -> {parent_id}",
            ErrorCode.CIRCULAR_REFERENCE,
            status_code=400,
            details={"folder_id": str(folder_id), "parent_id": str(parent_id)}
        )


class FolderNotEmptyError(DocstoreException):
    """Folder deletion blocked by remaining children."""

    def __init__(self, folder_id: Any, message: str, error_code: ErrorCode, count: int):
        super().__init__(
            message,
            error_code,
            status_code=400,
            details={"folder_id": str(folder_id), "count": count}
        )


class FolderHasChildrenError(FolderNotEmptyError):
    """Folder still has subfolders."""

    def __init__(self, folder_id: Any, count: int):
        super().__init__(
            folder_id,
            "Cannot delete folder with subfolders",
            ErrorCode.FOLDER_HAS_CHILDREN,
            count,
        )


class FolderHasDocumentsError(FolderNotEmptyError):
    """Folder still has documents."""

    def __init__(self, folder_id: Any, count: int):
        super().__init__(
            folder_id,
            "Cannot delete folder with documents",
            ErrorCode.FOLDER_HAS_DOCUMENTS,
            count,
        )


class ConstraintViolationError(DocstoreException):
    """Unique constraint rejected the write (e.g. duplicate username)."""

    def __init__(self, entity: str, field: Optional[str] = None):
        if field:
            message = f"A {entity} with this {field} already exists"
        else:
            message = f"{entity.capitalize()} violates a uniqueness constraint"
        details = {"entity": entity}
        if field:
            details["field"] = field
        super().__init__(
            message,
            ErrorCode.CONSTRAINT_VIOLATION,
            status_code=409,
            details=details
        )


class DatabaseError(DocstoreException):
    """Database operation failed."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        details = {}
        if original_error:
            details["original_error"] = str(original_error)

        super().__init__(
            message,
            ErrorCode.DATABASE_ERROR,
            status_code=500,
            details=details
        )
