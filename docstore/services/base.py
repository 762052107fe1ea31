"""Shared shape of the user, folder and document services.

Each service exposes the same five operations. Raw id strings coming from
the transport are parsed here, so a malformed id is an InvalidArgumentError
raised before the store is touched. Validation failures leave the session
untouched; store failures are rolled back by the repository layer.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Generic, List, Mapping, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..core.identity import parse_id
from ..repositories.base import BaseRepository, ModelT
from .query_filters import FilterSpec, build_predicates

CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

logger = logging.getLogger(__name__)


class ResourceService(ABC, Generic[ModelT, CreateT, UpdateT]):
    """List / get / create / update / delete for one entity type.

    Subclasses set ``filter_specs`` and build ``self.repo`` in __init__.
    """

    filter_specs: Mapping[str, FilterSpec] = {}
    repo: BaseRepository[ModelT]

    def __init__(self, db: Session):
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.repo.entity_name

    def list_entities(self, filters: Optional[Mapping[str, Optional[str]]] = None) -> List[ModelT]:
        """All entities matching the optional filters."""
        predicates = build_predicates(filters or {}, self.filter_specs)
        logger.info(
            f"Finding all {self.entity_name}s",
            extra={"filters": {p.field: str(p.value) if p.value else None for p in predicates}},
        )
        return self.repo.find_all(predicates)

    def get(self, raw_id: str) -> ModelT:
        """Load one active entity by its raw id string."""
        return self._load(parse_id(raw_id, "id"))

    @abstractmethod
    def create(self, data: CreateT) -> ModelT:
        ...

    @abstractmethod
    def update(self, raw_id: str, data: UpdateT) -> ModelT:
        ...

    def delete(self, raw_id: str) -> None:
        """Soft-delete one entity after the resource-specific guard passes."""
        entity = self.get(raw_id)
        logger.info(f"Deleting {self.entity_name}", extra={"id": str(entity.id)})
        self._check_deletable(entity)
        self.repo.delete(entity)
        self.repo.commit()

    # ------------------------------------------------------------------
    # Hooks and helpers
    # ------------------------------------------------------------------

    def _check_deletable(self, entity: ModelT) -> None:
        """Raise to veto a delete. No guard by default."""

    def _load(self, entity_id: uuid.UUID) -> ModelT:
        entity = self.repo.find_by_id(entity_id)
        if entity is None:
            logger.warning(
                f"{self.entity_name.capitalize()} not found", extra={"id": str(entity_id)}
            )
            raise self.repo.not_found_error(entity_id)
        return entity

    def _persist_new(self, entity: ModelT) -> ModelT:
        entity = self.repo.create(entity)
        self.repo.commit()
        return entity

    def _persist_changes(self, entity: ModelT, values: dict) -> ModelT:
        entity = self.repo.update_fields(entity, values)
        self.repo.commit()
        return entity
