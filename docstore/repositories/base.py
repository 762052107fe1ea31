"""Entity store: the persistence boundary the services depend on.

``EntityStore`` is the contract; ``BaseRepository`` implements it on a
SQLAlchemy session, so PostgreSQL and SQLite are interchangeable behind it.
Subclasses set model_class, entity_name, not_found_error and, optionally,
unique_fields and list_includes_deleted.

Every read except an unscoped ``find_all`` excludes soft-deleted rows via
``_base_query()``, so callers never need to think about ``deleted_at``.
"""

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, Iterator, List, Optional, Protocol, Sequence, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from ..database import Base
from ..exceptions import ConstraintViolationError, DatabaseError, EntityNotFoundError

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Predicate:
    """Equality on a named column, or IS NULL when value is None."""

    field: str
    value: Optional[uuid.UUID]

    @classmethod
    def equals(cls, field: str, value: uuid.UUID) -> "Predicate":
        return cls(field, value)

    @classmethod
    def is_null(cls, field: str) -> "Predicate":
        return cls(field, None)


class EntityStore(Protocol[ModelT]):
    """Operations the services need from persistence, per entity type."""

    def find_by_id(self, entity_id: uuid.UUID) -> Optional[ModelT]: ...

    def find_all(self, predicates: Sequence[Predicate] = ()) -> List[ModelT]: ...

    def count(self, predicates: Sequence[Predicate] = ()) -> int: ...

    def create(self, entity: ModelT) -> ModelT: ...

    def save(self, entity: ModelT) -> ModelT: ...

    def delete(self, entity: ModelT) -> None: ...


@contextmanager
def translate_store_errors(
    db: Session, entity_name: str, action: str, unique_fields: Tuple[str, ...] = ()
) -> Iterator[None]:
    """Roll back and re-raise SQLAlchemy failures as Docstore exceptions.

    IntegrityError becomes ConstraintViolationError (naming the unique field
    when the driver message mentions one); anything else becomes
    DatabaseError.
    """
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        message = str(exc.orig)
        field = next((f for f in unique_fields if f in message), None)
        logger.warning(
            f"Constraint violation on {entity_name} {action}",
            extra={"entity": entity_name, "field": field},
        )
        raise ConstraintViolationError(entity_name, field) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(
            f"Failed to {action} {entity_name}",
            extra={"entity": entity_name},
            exc_info=True,
        )
        raise DatabaseError(f"Failed to {action} {entity_name}", exc) from exc


class BaseRepository(Generic[ModelT]):
    """Shared SQLAlchemy implementation of EntityStore.

    Class variables to set in subclasses:
        model_class:           The SQLAlchemy model (e.g., Folder)
        entity_name:           Lower-case name used in messages ("folder")
        not_found_error:       Exception class raised by get_by_id
        unique_fields:         Columns with unique constraints, for error messages
        list_includes_deleted: True if find_all returns soft-deleted rows too
    """

    model_class: Type[ModelT]
    entity_name: str
    not_found_error: Type[EntityNotFoundError]
    unique_fields: Tuple[str, ...] = ()
    list_includes_deleted: bool = False

    def __init__(self, db: Session):
        self.db = db

    def _base_query(self) -> Query:
        """Active rows only."""
        return self.db.query(self.model_class).filter(self.model_class.deleted_at.is_(None))

    def _unscoped_query(self) -> Query:
        """All rows, soft-deleted included."""
        return self.db.query(self.model_class)

    def _apply(self, query: Query, predicates: Sequence[Predicate]) -> Query:
        for predicate in predicates:
            column = getattr(self.model_class, predicate.field)
            if predicate.value is None:
                query = query.filter(column.is_(None))
            else:
                query = query.filter(column == predicate.value)
        return query

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        with translate_store_errors(self.db, self.entity_name, action, self.unique_fields):
            yield

    # -- Reads -------------------------------------------------------------

    def find_by_id(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        """Get an active entity by primary key, or None."""
        with self._guard("load"):
            return self._base_query().filter(self.model_class.id == entity_id).first()

    def get_by_id(self, entity_id: uuid.UUID) -> ModelT:
        """Get an active entity by primary key. Raises not_found_error if missing."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise self.not_found_error(entity_id)
        return entity

    def find_all(self, predicates: Sequence[Predicate] = ()) -> List[ModelT]:
        """All matching entities, oldest first.

        Soft-deleted rows are included only when list_includes_deleted is set.
        """
        query = self._unscoped_query() if self.list_includes_deleted else self._base_query()
        with self._guard("list"):
            return (
                self._apply(query, predicates)
                .order_by(self.model_class.created_at, self.model_class.id)
                .all()
            )

    def count(self, predicates: Sequence[Predicate] = ()) -> int:
        """Number of active entities matching all predicates."""
        with self._guard("count"):
            return self._apply(self._base_query(), predicates).count()

    # -- Writes ------------------------------------------------------------

    def create(self, entity: ModelT) -> ModelT:
        with self._guard("create"):
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
        return entity

    def save(self, entity: ModelT) -> ModelT:
        with self._guard("update"):
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Soft delete: stamp deleted_at, keep the row."""
        with self._guard("delete"):
            entity.deleted_at = datetime.now(timezone.utc)
            self.db.flush()

    def commit(self) -> None:
        with self._guard("commit"):
            self.db.commit()

    def update_fields(self, entity: ModelT, values: dict[str, Any]) -> ModelT:
        """Replace the given columns on *entity* and save it."""
        for key, value in values.items():
            setattr(entity, key, value)
        return self.save(entity)
