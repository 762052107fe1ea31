"""User lifecycle."""

import logging

from sqlalchemy.orm import Session

from ..models import User
from ..repositories import UserRepository
from ..schemas.user import UserCreate, UserUpdate
from .base import ResourceService
from .query_filters import USER_FILTERS

logger = logging.getLogger(__name__)


class UserService(ResourceService[User, UserCreate, UserUpdate]):
    """Users have no relational fields; uniqueness is left to the store.

    Deleting a user does not check for folders or documents it still owns.
    """

    filter_specs = USER_FILTERS

    def __init__(self, db: Session):
        super().__init__(db)
        self.repo = UserRepository(db)

    def create(self, data: UserCreate) -> User:
        logger.info("Creating user", extra={"username": data.username, "email": data.email})
        user = User(id=data.id, username=data.username, email=data.email)
        return self._persist_new(user)

    def update(self, raw_id: str, data: UserUpdate) -> User:
        existing = self.get(raw_id)
        logger.info(
            "Updating user",
            extra={"id": str(existing.id), "username": data.username, "email": data.email},
        )
        return self._persist_changes(existing, {"username": data.username, "email": data.email})
