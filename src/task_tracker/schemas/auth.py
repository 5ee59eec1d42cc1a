"""Schemas describing authentication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthCredentials(BaseModel):
    """Username/password pair submitted on signup."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "jane", "password": "StrongPass123!"}}
    )

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)


class AccessToken(BaseModel):
    """Bearer token returned after a successful sign in."""

    access_token: str
    token_type: str = Field(default="bearer", frozen=True)
    expires_in: int


class TokenPayload(BaseModel):
    """Validated JWT payload."""

    model_config = ConfigDict(extra="ignore")

    sub: str
    username: str
    exp: datetime
    iat: datetime
    jti: str


__all__ = ["AccessToken", "AuthCredentials", "TokenPayload"]
