"""Boundary validators applied to raw request values."""

from __future__ import annotations

from typing import Any

from .errors import BadRequestError
from .models import TaskStatus


class TaskStatusValidator:
    """Normalise a raw status value and check it against the allowed statuses."""

    allowed_statuses: tuple[TaskStatus, ...] = (
        TaskStatus.OPEN,
        TaskStatus.IN_PROGRESS,
        TaskStatus.DONE,
    )

    def __call__(self, value: Any) -> TaskStatus:
        if not isinstance(value, str):
            raise BadRequestError(f"Status '{value}' is not valid!")
        normalised = value.upper()
        for allowed in self.allowed_statuses:
            if allowed.value == normalised:
                return allowed
        raise BadRequestError(f"Status '{normalised}' is not valid!")


validate_task_status = TaskStatusValidator()

__all__ = ["TaskStatusValidator", "validate_task_status"]
