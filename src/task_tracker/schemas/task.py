"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..models import TaskStatus

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Buy milk",
    "description": "Two litres, semi-skimmed.",
    "status": TaskStatus.OPEN.value,
    "user_id": 42,
    "created_at": "2023-01-01T12:00:00Z",
    "updated_at": "2023-01-02T08:30:00Z",
}


class TaskCreate(BaseModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "description": "Two litres, semi-skimmed.",
            }
        }
    )

    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None)


class TaskStatusUpdate(BaseModel):
    """Payload for changing the status of a task.

    ``status`` stays a raw value here; it is normalised by the status
    validator so that unknown values produce a message naming them.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": TaskStatus.IN_PROGRESS.value}}
    )

    status: Any = Field(description="One of OPEN, IN_PROGRESS or DONE (case-insensitive).")


class TaskFilter(BaseModel):
    """Optional filters applied when listing tasks."""

    status: TaskStatus | None = None
    search: str | None = None


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    user_id: int
    created_at: datetime
    updated_at: datetime


__all__ = [
    "TaskCreate",
    "TaskFilter",
    "TaskRead",
    "TaskStatusUpdate",
]
