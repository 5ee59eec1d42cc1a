from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from itertools import count

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from task_tracker.core.config import get_settings
from task_tracker.db.base import metadata
from task_tracker.deps import get_db_session
from task_tracker.main import create_app


@dataclass(slots=True)
class AuthenticatedUser:
    username: str
    password: str
    access_token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(session: AsyncSession) -> AsyncIterator[FastAPI]:
    get_settings.cache_clear()
    application = create_app()

    async def _override_db_session() -> AsyncIterator[AsyncSession]:
        yield session

    application.dependency_overrides[get_db_session] = _override_db_session
    try:
        yield application
    finally:
        application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def authenticated_user(
    client: AsyncClient,
) -> AsyncIterator[Callable[..., Awaitable[AuthenticatedUser]]]:
    counter = count()

    async def _factory(
        *,
        username: str | None = None,
        password: str = "StrongPass123!",
    ) -> AuthenticatedUser:
        actual_username = username or f"user-{next(counter)}"
        signup = await client.post(
            "/api/auth/signup",
            json={"username": actual_username, "password": password},
        )
        assert signup.status_code == 201, signup.text

        signin = await client.post(
            "/api/auth/signin",
            data={"username": actual_username, "password": password},
        )
        assert signin.status_code == 200, signin.text
        return AuthenticatedUser(
            username=actual_username,
            password=password,
            access_token=signin.json()["access_token"],
        )

    yield _factory
