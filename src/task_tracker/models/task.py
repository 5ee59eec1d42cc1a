"""Task domain models built with SQLModel."""

from __future__ import annotations

from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    description: str | None = Field(
        default=None,
        sa_column=sa.Column(sa.Text(), nullable=True),
    )
    status: TaskStatus = Field(
        default=TaskStatus.OPEN,
        sa_column=sa.Column(
            sa.Enum(TaskStatus, name="task_status", native_enum=False, validate_strings=True),
            nullable=False,
            server_default=TaskStatus.OPEN.value,
        ),
    )
    user_id: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task model."""

    __tablename__ = "tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_tasks_title_length"),
        sa.Index("ix_tasks_user_id", "user_id"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Task", "TaskBase", "TaskStatus"]
