"""Service layer encapsulating task-related operations.

Each operation receives the requesting ``User`` explicitly and is scoped to
that user's tasks. Tasks owned by somebody else behave exactly like tasks
that do not exist.
"""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import NotFoundError
from ..models import Task, TaskStatus, User, utcnow
from ..repositories import TaskRepository
from ..schemas import TaskCreate, TaskFilter

logger = logging.getLogger(__name__)


def _task_not_found(task_id: int) -> NotFoundError:
    return NotFoundError(f"Task '{task_id}' is not found")


class TaskService:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = TaskRepository(session)

    async def get_tasks(self, filters: TaskFilter, user: User) -> list[Task]:
        """Return the user's tasks matching every supplied filter."""
        return await self._repository.list_for_owner(
            user.id,
            status=filters.status,
            search=filters.search,
        )

    async def get_task_by_id(self, task_id: int, user: User) -> Task:
        """Return the user's task with ``task_id`` or raise ``NotFoundError``."""
        task = await self._repository.get_for_owner(task_id, user.id)
        if task is None:
            raise _task_not_found(task_id)
        return task

    async def create_task(self, payload: TaskCreate, user: User) -> Task:
        """Create a new ``OPEN`` task owned by ``user``."""
        task = Task(
            title=payload.title,
            description=payload.description,
            status=TaskStatus.OPEN,
            user_id=user.id,
        )
        await self._repository.add(task)
        await self._session.commit()
        await self._repository.refresh(task)
        logger.info("Created task %s for user %s", task.id, task.user_id)
        return task

    async def update_task_status(self, task_id: int, status: TaskStatus, user: User) -> Task:
        """Set the status of the user's task and return the updated task."""
        task = await self.get_task_by_id(task_id, user)
        task.status = status
        task.updated_at = utcnow()
        await self._session.commit()
        await self._repository.refresh(task)
        logger.info("Task %s moved to %s", task.id, status.value)
        return task

    async def delete_task(self, task_id: int, user: User) -> None:
        """Delete the user's task with ``task_id`` or raise ``NotFoundError``."""
        affected = await self._repository.delete_for_owner(task_id, user.id)
        if not affected:
            raise _task_not_found(task_id)
        await self._session.commit()
        logger.info("Deleted task %s", task_id)


__all__ = ["TaskService"]
