"""Identifier allocation, parsing, and automatic assignment on insert."""

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from docstore.core.identity import NIL_ID, new_id, parse_id
from docstore.exceptions import ConstraintViolationError, InvalidArgumentError
from docstore.models import User


class TestNewId:

    def test_returns_uuid4(self):
        value = new_id()
        assert isinstance(value, uuid.UUID)
        assert value.version == 4

    def test_concurrent_calls_do_not_collide(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: new_id(), range(2000)))
        assert len(set(ids)) == 2000


class TestParseId:

    def test_parses_canonical_form(self):
        value = new_id()
        assert parse_id(str(value)) == value

    @pytest.mark.parametrize("raw", ["", "null", "not-a-uuid", "1234"])
    def test_malformed_raises_invalid_argument(self, raw):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_id(raw, "parent_id")
        assert exc_info.value.status_code == 400
        assert exc_info.value.details["field"] == "parent_id"


class TestAssignOnInsert:

    def test_missing_id_assigned_on_flush(self, db):
        user = User(username="a", email="a@example.com")
        assert user.id is None
        db.add(user)
        db.flush()
        assert isinstance(user.id, uuid.UUID)
        assert user.id != NIL_ID

    def test_nil_id_replaced(self, db):
        user = User(id=NIL_ID, username="b", email="b@example.com")
        db.add(user)
        db.flush()
        assert user.id != NIL_ID

    def test_preset_id_kept(self, make_user):
        preset = uuid.UUID("11111111-2222-4333-8444-555555555555")
        user = make_user(id=preset)
        assert user.id == preset

    def test_duplicate_preset_id_is_constraint_violation(self, db, make_user):
        preset = new_id()
        make_user(id=preset)
        # Forget the first row so the clash is caught by the database, not the identity map.
        db.expunge_all()
        with pytest.raises(ConstraintViolationError):
            make_user(id=preset)
