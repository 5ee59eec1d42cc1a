"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .core.security import decode_token
from .db.session import async_session_maker
from .errors import UnauthorizedError
from .models import User
from .schemas import TaskFilter, TokenPayload
from .services import UserService
from .validation import validate_task_status

_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/signin")


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session, rolled back if the request fails."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


SettingsDependency = Annotated[Settings, Depends(get_settings)]
DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def _decode_access_token(token: str, settings: Settings) -> TokenPayload:
    try:
        payload = decode_token(
            token=token,
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
        return TokenPayload.model_validate(payload)
    except (JWTError, ValidationError) as exc:
        raise UnauthorizedError() from exc


async def require_current_user(
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
    token: str = Depends(_oauth2_scheme),
) -> User:
    """Resolve the bearer token to a persisted ``User`` or fail with 401."""

    token_payload = _decode_access_token(token, settings)
    try:
        user_id = int(token_payload.sub)
    except ValueError as exc:
        raise UnauthorizedError() from exc

    user = await UserService(session).get_user(user_id)
    if user is None:
        raise UnauthorizedError()
    return user


CurrentUserDependency = Annotated[User, Depends(require_current_user)]


def get_task_filter(
    status: Annotated[
        str | None,
        Query(description="Only return tasks with this status (OPEN, IN_PROGRESS, DONE)."),
    ] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive substring matched against title and description."),
    ] = None,
) -> TaskFilter:
    """Build a ``TaskFilter`` from query parameters, validating ``status``."""

    return TaskFilter(
        status=validate_task_status(status) if status is not None else None,
        search=search or None,
    )


TaskFilterDependency = Annotated[TaskFilter, Depends(get_task_filter)]


__all__ = [
    "CurrentUserDependency",
    "DatabaseSessionDependency",
    "SettingsDependency",
    "TaskFilterDependency",
    "get_db_session",
    "get_task_filter",
    "require_current_user",
]
