"""Metadata registry shared by ``init_db`` and Alembic migrations."""

from __future__ import annotations

from sqlmodel import SQLModel

from ..models import Task, User  # noqa: F401  (registers tables on the metadata)

metadata = SQLModel.metadata

__all__ = ["SQLModel", "metadata"]
