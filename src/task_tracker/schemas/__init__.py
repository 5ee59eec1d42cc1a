"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import AccessToken, AuthCredentials, TokenPayload
from .task import TaskCreate, TaskFilter, TaskRead, TaskStatusUpdate

__all__ = [
    "AccessToken",
    "AuthCredentials",
    "TaskCreate",
    "TaskFilter",
    "TaskRead",
    "TaskStatusUpdate",
    "TokenPayload",
]
