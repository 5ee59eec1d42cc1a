"""Routes handling task CRUD operations for the authenticated user."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from ...deps import CurrentUserDependency, DatabaseSessionDependency, TaskFilterDependency
from ...schemas import TaskCreate, TaskRead, TaskStatusUpdate
from ...services import TaskService
from ...validation import validate_task_status

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Ids are INTEGER primary keys; anything outside that range cannot name a task.
TaskId = Annotated[int, Path(ge=1, le=2_147_483_647, description="Id of one of your tasks.")]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Task not found"}}


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List the current user's tasks with optional filters",
)
async def list_tasks(
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
    filters: TaskFilterDependency,
) -> list[TaskRead]:
    tasks = await TaskService(session).get_tasks(filters, current_user)
    return [TaskRead.model_validate(task) for task in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Retrieve a task by id",
    responses=_NOT_FOUND,
)
async def get_task(
    task_id: TaskId,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    task = await TaskService(session).get_task_by_id(task_id, current_user)
    return TaskRead.model_validate(task)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: TaskCreate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    task = await TaskService(session).create_task(payload, current_user)
    return TaskRead.model_validate(task)


@router.patch(
    "/{task_id}/status",
    response_model=TaskRead,
    summary="Change the status of a task",
    responses=_NOT_FOUND,
)
async def update_task_status(
    task_id: TaskId,
    payload: TaskStatusUpdate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    new_status = validate_task_status(payload.status)
    task = await TaskService(session).update_task_status(task_id, new_status, current_user)
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses=_NOT_FOUND,
)
async def delete_task(
    task_id: TaskId,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> Response:
    await TaskService(session).delete_task(task_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
