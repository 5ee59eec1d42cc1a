"""Authentication service issuing access tokens for registered users."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings
from ..core.security import GeneratedToken, create_access_token, verify_password
from ..errors import UnauthorizedError
from ..models import User
from .users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Sign-in workflow on top of :class:`UserService`."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self._settings = settings
        self._user_service = UserService(session)

    async def authenticate_user(self, username: str, password: str) -> User | None:
        user = await self._user_service.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    def build_access_token(self, user: User) -> GeneratedToken:
        return create_access_token(
            subject=user.id,
            username=user.username,
            settings=self._settings,
        )

    async def sign_in(self, username: str, password: str) -> GeneratedToken:
        """Return an access token for valid credentials.

        Unknown usernames and wrong passwords fail identically.
        """
        user = await self.authenticate_user(username, password)
        if user is None:
            logger.warning("Failed sign in attempt for %r", username)
            raise UnauthorizedError("Invalid credentials.")
        return self.build_access_token(user)


__all__ = ["AuthService"]
