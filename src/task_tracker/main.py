"""Entry point for the task tracker FastAPI application."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db.session import dispose_engine, init_db
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings)

    router_prefix = settings.router_prefix
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Personal task tracking API.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    application.state.settings = settings

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    application.include_router(api_router, prefix=router_prefix)
    application.include_router(health_router)

    register_exception_handlers(application)

    if settings.db_create_all:

        @application.on_event("startup")
        async def _create_tables() -> None:
            logger.info("Creating database tables from model metadata")
            await init_db()

    @application.on_event("shutdown")
    async def _dispose_engine() -> None:
        await dispose_engine()

    return application


app = create_app()


def run() -> None:
    """Convenience entry point for the ``task-tracker`` console script."""
    settings: Settings = get_settings()
    uvicorn.run(
        "task_tracker.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
