"""
Loyalty card use cases scoped to the signed-in account.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from api.core.errors import ParameterParseFailure, PersistenceOtherError, persistence_error
from api.db.models import Card
from api.domain.schemas import AddLoyalty
from api.domain.validation import ID_BITS, PAGING_BITS, parse_int, parse_int_or_default
from api.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


def card_to_dict(entity: Card) -> dict:
    return {
        "id": entity.id,
        "name": entity.name,
        "color": entity.color,
        "code": entity.code,
    }


class LoyaltyService:
    """Create, list and delete loyalty cards."""

    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.repository = repository or SQLRepository()

    def create(self, user_id: int, payload: AddLoyalty) -> dict:
        # the response is the owner's newest row, not an insert-returned id
        try:
            latest = self.repository.create_card(payload.name, payload.color, payload.code, user_id)
        except SQLAlchemyError as exc:
            raise persistence_error(exc) from exc
        if latest is None:
            raise PersistenceOtherError()
        return card_to_dict(latest)

    def list_cards(self, user_id: int, limit: str | None = None, offset: str | None = None) -> list[dict]:
        resolved_limit = parse_int_or_default(limit, DEFAULT_LIMIT, bits=PAGING_BITS)
        resolved_offset = parse_int_or_default(offset, DEFAULT_OFFSET, bits=PAGING_BITS)
        try:
            cards = self.repository.list_cards_for_user(user_id, limit=resolved_limit, offset=resolved_offset)
        except SQLAlchemyError as exc:
            raise persistence_error(exc) from exc
        return [card_to_dict(card) for card in cards]

    def delete(self, raw_card_id: str) -> int:
        """Delete a card by id alone; a missing row is not an error."""
        try:
            card_id = parse_int(raw_card_id, bits=ID_BITS)
        except ValueError:
            raise ParameterParseFailure() from None
        try:
            removed = self.repository.delete_card(card_id)
        except SQLAlchemyError as exc:
            raise persistence_error(exc) from exc
        logger.info("delete of card %s removed %d row(s)", card_id, removed)
        return removed
