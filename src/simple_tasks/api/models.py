"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A single to-do item."""

    id: int = Field(..., description="Store-assigned task identifier")
    description: str = Field(..., description="Task text as entered by the user")


class AppState(BaseModel):
    """All tasks plus the identifier counter.

    This is also the on-disk format of the tasks file, so both fields are
    required when parsing.
    """

    tasks: list[Task] = Field(..., description="Tasks in display order")
    next_task_id: int = Field(..., description="Next identifier to hand out")

    @classmethod
    def empty(cls) -> "AppState":
        """The state of a fresh install."""
        return cls(tasks=[], next_task_id=0)

    def allocate_id(self) -> int:
        """Return the next free task id and advance the counter.

        Callers must hold the store lock.
        """
        task_id = self.next_task_id
        self.next_task_id += 1
        return task_id


class AddTaskRequest(BaseModel):
    """Request to add a new task."""

    task_description: str = Field(..., description="Description of the new task")


class DebugInfoResponse(BaseModel):
    """Troubleshooting information."""

    info: str = Field(default="", description="Free-form environment and path report")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = "0.1.0"
    uptime_seconds: float = 0.0
