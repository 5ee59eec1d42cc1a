"""Repository for interacting with task persistence models.

Every query here carries the owner predicate; there is no unscoped lookup.
"""

from __future__ import annotations

from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task, TaskStatus
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_for_owner(
        self,
        user_id: int,
        *,
        status: TaskStatus | None = None,
        search: str | None = None,
    ) -> list[Task]:
        """Return the owner's tasks matching every supplied filter."""
        query = select(Task).where(Task.user_id == user_id)
        if status is not None:
            query = query.where(Task.status == status)
        if search:
            query = query.where(
                or_(
                    Task.title.icontains(search, autoescape=True),
                    Task.description.icontains(search, autoescape=True),
                )
            )
        result = await self.session.execute(query.order_by(Task.id))
        return list(result.scalars().all())

    async def get_for_owner(self, task_id: int, user_id: int) -> Task | None:
        """Retrieve a task by ID only if it belongs to the provided owner."""
        result = await self.session.execute(
            select(Task).where(Task.id == task_id, Task.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def delete_for_owner(self, task_id: int, user_id: int) -> int:
        """Delete the owner's task with ``task_id``; return the affected row count."""
        result = await self.session.execute(
            delete(Task).where(Task.id == task_id, Task.user_id == user_id)
        )
        return result.rowcount or 0
