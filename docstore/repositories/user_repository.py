"""Repository for users."""

from ..exceptions import UserNotFoundError
from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Data access layer for users.

    Listing is unscoped: soft-deleted users are returned alongside active
    ones, with deleted_at set. Lookups by id still only see active users.
    """

    model_class = User
    entity_name = "user"
    not_found_error = UserNotFoundError
    unique_fields = ("username", "email")
    list_includes_deleted = True
