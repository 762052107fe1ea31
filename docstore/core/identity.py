"""Identifier allocation and parsing.

Every entity is keyed by a random UUID4. Allocation needs no shared state,
so it is safe from any thread or worker process.
"""

import uuid

from ..exceptions import InvalidArgumentError

# The zero UUID is treated the same as "no id supplied".
NIL_ID = uuid.UUID(int=0)


def new_id() -> uuid.UUID:
    return uuid.uuid4()


def parse_id(raw: str, field: str = "id") -> uuid.UUID:
    """Parse an identifier string, raising InvalidArgumentError if malformed."""
    try:
        return uuid.UUID(raw)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidArgumentError(f"Invalid {field}: {raw!r}", field=field, value=raw) from exc


def assign_missing_id(mapper, connection, target) -> None:
    """SQLAlchemy ``before_insert`` hook: fill in an id unless one was pre-set.

    Pre-set ids (seeding, tests) are kept; the primary key constraint
    rejects duplicates.
    """
    if target.id is None or target.id == NIL_ID:
        target.id = new_id()
