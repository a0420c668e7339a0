"""
Account use cases: signup, credential check and self lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from api.core.errors import PersistenceUniqueViolation, persistence_error
from api.db.models import User
from api.domain.schemas import UserSignIn, UserSignup
from api.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)


def user_to_dict(entity: User) -> dict:
    return {
        "id": entity.id,
        "email": entity.email,
        "name": entity.name,
        "pass": entity.password,
    }


@dataclass
class AuthService:
    """Handles registration, sign-in and lookups of the signed-in account."""

    def __post_init__(self):
        self.repository = SQLRepository()

    def signup(self, payload: UserSignup) -> None:
        try:
            self.repository.create_user(payload.email, payload.name, payload.password)
        except SQLAlchemyError as exc:
            error = persistence_error(exc)
            if isinstance(error, PersistenceUniqueViolation):
                logger.info("signup rejected: email already registered")
            raise error from exc
        logger.info("signup accepted")

    def signin(self, payload: UserSignIn) -> Optional[int]:
        """Return the user id for an exact email/password match, or None."""
        try:
            user = self.repository.find_user_by_credentials(payload.email, payload.password)
        except SQLAlchemyError as exc:
            raise persistence_error(exc) from exc
        if user is None:
            logger.info("signin failed: invalid credentials")
            return None
        logger.info("signin succeeded for user %s", user.id)
        return user.id

    def get_user(self, user_id: int) -> Optional[dict]:
        """
        Return the account record, or None.

        A failed lookup and a missing row both yield None.
        """
        try:
            user = self.repository.get_user(user_id)
        except SQLAlchemyError:
            logger.exception("lookup of user %s failed", user_id)
            return None
        return user_to_dict(user) if user else None
