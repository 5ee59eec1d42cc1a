"""Domain models exposed by the task tracker."""

from __future__ import annotations

from .common import TimestampMixin, utcnow
from .task import Task, TaskBase, TaskStatus
from .user import User, UserBase

__all__ = [
    "Task",
    "TaskBase",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserBase",
    "utcnow",
]
