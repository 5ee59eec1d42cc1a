"""Health and service metadata endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import SettingsDependency
from ...schemas.health import HealthCheckResponse, RootResponse

router = APIRouter(tags=["system"])


@router.get("/healthz", response_model=HealthCheckResponse, summary="Health check")
async def read_health() -> HealthCheckResponse:
    return HealthCheckResponse(status="ok")


@router.get("/", response_model=RootResponse, summary="Service metadata")
async def read_root(settings: SettingsDependency) -> RootResponse:
    """Name, environment and version of the running service, plus the API prefix."""
    return RootResponse(
        name=settings.project_name,
        environment=settings.environment,
        version=settings.version,
        api_prefix=settings.router_prefix,
    )
