"""Responses of the unauthenticated service endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    status: Literal["ok"]


class RootResponse(BaseModel):
    """Service identity and where the task API is mounted."""

    name: str
    environment: str
    version: str
    api_prefix: str


__all__ = ["HealthCheckResponse", "RootResponse"]
