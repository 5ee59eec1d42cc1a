"""Service layer for user registration."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.security import generate_salt, hash_password
from ..errors import ConflictError, ServerError
from ..models import User
from ..repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = UserRepository(session)

    async def sign_up(self, *, username: str, password: str) -> None:
        """Register ``username`` with a freshly salted password hash.

        Raises ``ConflictError`` when the username is taken and ``ServerError``
        for any other persistence failure.
        """
        salt = generate_salt()
        user = User(username=username, salt=salt, password=hash_password(password, salt))
        try:
            await self._repository.add(user)
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Signup rejected for duplicate username %r", username)
            raise ConflictError("Username already exists") from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            logger.exception("Failed to persist user %r", username)
            raise ServerError() from exc
        logger.info("Registered user %s (%r)", user.id, username)

    async def get_user(self, user_id: int) -> User | None:
        """Fetch a user by primary key."""
        return await self._repository.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        """Fetch a user by their unique username."""
        return await self._repository.get_by_username(username)


__all__ = ["UserService"]
