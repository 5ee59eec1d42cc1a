"""Security helpers for salted password hashing and JWT access tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import bcrypt
from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(slots=True)
class GeneratedToken:
    """Represents a generated JWT token with associated metadata."""

    token: str
    expires_at: datetime
    jti: str


def generate_salt() -> str:
    """Return a fresh bcrypt salt (``$2b$<cost>$<22 chars>``)."""

    return bcrypt.gensalt().decode("ascii")


def hash_password(password: str, salt: str) -> str:
    """Hash ``password`` with the provided per-user ``salt``."""

    return bcrypt.hashpw(password.encode("utf-8"), salt.encode("ascii")).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hashed counterpart."""

    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    *,
    subject: str | int,
    username: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> GeneratedToken:
    """Create a signed JWT access token for the provided subject."""

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = now + expires_delta
    payload: dict[str, Any] = {
        "sub": str(subject),
        "username": username,
        "iat": now,
        "exp": expire,
        "jti": uuid4().hex,
    }
    token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return GeneratedToken(token=token, expires_at=expire, jti=payload["jti"])


def decode_token(*, token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Decode a JWT token and return its payload."""

    return jwt.decode(token, secret, algorithms=[algorithm])


__all__ = [
    "GeneratedToken",
    "JWTError",
    "create_access_token",
    "decode_token",
    "generate_salt",
    "hash_password",
    "verify_password",
]
