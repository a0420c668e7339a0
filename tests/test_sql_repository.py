"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from api.core.errors import is_unique_violation
from api.db.models import Card
from api.repositories.sql_repository import SQLRepository


def test_user_lookup_by_credentials(temp_db):
    repo = SQLRepository()
    repo.create_user("alice@example.com", "Alice", "secret")

    user = repo.find_user_by_credentials("alice@example.com", "secret")
    assert user is not None
    assert user.id == 1
    assert user.name == "Alice"
    assert repo.find_user_by_credentials("alice@example.com", "wrong") is None
    assert repo.find_user_by_credentials("bob@example.com", "secret") is None
    assert repo.get_user(user.id).email == "alice@example.com"
    assert repo.get_user(999) is None


def test_duplicate_email_is_a_unique_violation(temp_db):
    repo = SQLRepository()
    repo.create_user("alice@example.com", "Alice", "secret")
    with pytest.raises(IntegrityError) as excinfo:
        repo.create_user("alice@example.com", "Other", "other")
    assert is_unique_violation(excinfo.value)


def test_card_requires_existing_owner(temp_db):
    repo = SQLRepository()
    with pytest.raises(IntegrityError) as excinfo:
        repo.create_card("Store", None, "123", user_id=42)
    assert not is_unique_violation(excinfo.value)


def test_cards_are_listed_per_owner_and_deleted_by_id(temp_db):
    repo = SQLRepository()
    repo.create_user("alice@example.com", "Alice", "a")
    repo.create_user("bob@example.com", "Bob", "b")
    repo.create_card("Store", "#fff", "111", user_id=1)
    market = repo.create_card("Market", None, "222", user_id=2)
    cafe = repo.create_card("Cafe", None, "333", user_id=1)

    assert (market.name, market.user_id) == ("Market", 2)
    assert (cafe.id, cafe.name, cafe.user_id) == (3, "Cafe", 1)
    alice_cards = repo.list_cards_for_user(1, limit=10, offset=0)
    assert [card.name for card in alice_cards] == ["Store", "Cafe"]
    assert [card.name for card in repo.list_cards_for_user(1, limit=1, offset=1)] == ["Cafe"]

    assert repo.delete_card(alice_cards[0].id) == 1
    assert repo.delete_card(alice_cards[0].id) == 0
    assert [card.name for card in repo.list_cards_for_user(1, limit=10, offset=0)] == ["Cafe"]


def test_create_tables_reset_empties_schema(temp_db):
    from api.db.create_tables import create_all

    repo = SQLRepository()
    repo.create_user("alice@example.com", "Alice", "secret")
    assert create_all() == ["cards", "users"]
    assert repo.get_user(1) is not None

    create_all(reset=True)
    assert repo.get_user(1) is None


def test_card_read_back_ignores_newer_rows_of_other_owners(temp_db):
    class InterleavingRepository(SQLRepository):
        """Another owner's card lands between the insert and the read-back."""

        def _latest_card_for_user(self, session, user_id):
            session.add(Card(name="Intruder", color=None, code="999", user_id=2))
            session.flush()
            return super()._latest_card_for_user(session, user_id)

    base = SQLRepository()
    base.create_user("alice@example.com", "Alice", "a")
    base.create_user("bob@example.com", "Bob", "b")

    card = InterleavingRepository().create_card("Store", None, "111", user_id=1)

    assert (card.id, card.name, card.code, card.user_id) == (1, "Store", "111", 1)
    assert [c.name for c in base.list_cards_for_user(2, limit=10, offset=0)] == ["Intruder"]


def test_models_map_plain_columns_only():
    from api.db.models import User

    assert not User.__mapper__.relationships
    assert not Card.__mapper__.relationships
    assert [fk.target_fullname for fk in Card.__table__.c.user_id.foreign_keys] == ["users.id"]
