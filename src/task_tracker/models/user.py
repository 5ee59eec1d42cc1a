"""User domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    username: str = Field(
        max_length=64,
        sa_column=sa.Column(
            sa.String(length=64),
            nullable=False,
            unique=True,
        ),
    )


class User(UserBase, TimestampMixin, table=True):
    """Persistent user model.

    ``password`` holds the bcrypt hash produced with the per-user ``salt``;
    the plaintext password is never stored.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    password: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    salt: str = Field(
        max_length=64,
        sa_column=sa.Column(sa.String(length=64), nullable=False),
    )


__all__ = ["User", "UserBase"]
