"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from api.db.models import User, Card
from api.db.session import get_session


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- users --------------------------
    def create_user(self, email: str, name: str, password: str) -> None:
        with get_session() as session:
            session.add(User(email=email, name=name, password=password))
            session.commit()

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        with get_session() as session:
            stmt = select(User).where(User.email == email, User.password == password).limit(1)
            return session.execute(stmt).scalars().first()

    def get_user(self, user_id: int) -> Optional[User]:
        with get_session() as session:
            stmt = select(User).where(User.id == user_id).limit(1)
            return session.execute(stmt).scalars().first()

    # -------------------------- cards --------------------------
    def create_card(self, name: str, color: str | None, code: str, user_id: int) -> Optional[Card]:
        """Insert a card and read back the owner's newest row in the same transaction."""
        with get_session() as session:
            session.add(Card(name=name, color=color, code=code, user_id=user_id))
            session.flush()
            latest = self._latest_card_for_user(session, user_id)
            session.commit()
            return latest

    def _latest_card_for_user(self, session: Session, user_id: int) -> Optional[Card]:
        stmt = select(Card).where(Card.user_id == user_id).order_by(Card.id.desc()).limit(1)
        return session.execute(stmt).scalars().first()

    def list_cards_for_user(self, user_id: int, *, limit: int, offset: int) -> list[Card]:
        with get_session() as session:
            stmt = (
                select(Card)
                .where(Card.user_id == user_id)
                .order_by(Card.id)
                .limit(limit)
                .offset(offset)
            )
            return list(session.execute(stmt).scalars().all())

    def delete_card(self, card_id: int) -> int:
        with get_session() as session:
            result = session.execute(delete(Card).where(Card.id == card_id))
            session.commit()
            return result.rowcount or 0
