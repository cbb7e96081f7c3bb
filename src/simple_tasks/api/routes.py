"""API routes for the task store service.

Handlers are plain functions so they run on the server's thread pool; the
store serializes them with its own lock.
"""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, status

from simple_tasks.api.models import (
    AddTaskRequest,
    AppState,
    DebugInfoResponse,
    HealthResponse,
    Task,
)
from simple_tasks.store.tasks import TaskStore, get_task_store

router = APIRouter()

# Track service start time for uptime
_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version="0.1.0",
        uptime_seconds=time.time() - _start_time,
    )


# =============================================================================
# App State
# =============================================================================


@router.post("/state/restore", response_model=AppState)
def restore_app_state(
    task_store: Annotated[TaskStore, Depends(get_task_store)],
) -> AppState:
    """Reload the state from the tasks file and return it."""
    return task_store.restore()


# =============================================================================
# Task Management
# =============================================================================


@router.get("/tasks", response_model=list[Task])
def list_tasks(
    task_store: Annotated[TaskStore, Depends(get_task_store)],
) -> list[Task]:
    """List all tasks in display order."""
    return task_store.list_tasks()


@router.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
def add_task(
    request: AddTaskRequest,
    task_store: Annotated[TaskStore, Depends(get_task_store)],
) -> Task:
    """Add a new task to the end of the list."""
    return task_store.add(request.task_description)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_task(
    task_id: int,
    task_store: Annotated[TaskStore, Depends(get_task_store)],
) -> None:
    """Remove a task. Unknown ids are ignored."""
    task_store.remove(task_id)


# =============================================================================
# Diagnostics
# =============================================================================


@router.get("/debug", response_model=DebugInfoResponse)
def debug_info(
    task_store: Annotated[TaskStore, Depends(get_task_store)],
) -> DebugInfoResponse:
    """Environment and path report for troubleshooting."""
    return DebugInfoResponse(info=task_store.debug_info())
