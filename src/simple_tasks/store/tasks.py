"""Task list state with file persistence."""

import logging
import os
import platform
import threading
from pathlib import Path

from simple_tasks.api.models import AppState, Task
from simple_tasks.store import persistence

logger = logging.getLogger(__name__)


class TaskStore:
    """Holds the app state and keeps the tasks file in sync with it.

    Every public method runs under a single lock, including the file I/O,
    so concurrent callers are fully serialized and the file always reflects
    a complete state. A failed save is logged and otherwise ignored: the
    in-memory change stands.
    """

    def __init__(self, storage_path: Path | None = None) -> None:
        """Initialize the task store with an empty state."""
        self._state = AppState.empty()
        self._storage_path = storage_path or persistence.resolve_path()
        self._lock = threading.Lock()

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def restore(self) -> AppState:
        """Replace the live state with the contents of the tasks file.

        A missing or unreadable file resets the live state to empty.

        Returns:
            A copy of the restored state
        """
        logger.info("Restoring app state...")
        with self._lock:
            restored = persistence.load(self._storage_path)
            self._state.tasks = restored.tasks
            self._state.next_task_id = restored.next_task_id
            logger.info(f"Restored {len(restored.tasks)} tasks")
            return self._state.model_copy(deep=True)

    def add(self, description: str) -> Task:
        """Append a new task and persist.

        Args:
            description: Task text, may be empty

        Returns:
            The created Task
        """
        with self._lock:
            task = Task(id=self._state.allocate_id(), description=description)
            self._state.tasks.append(task)
            logger.info(f"Added task {task.id}")
            self._log_tasks()
            self._save()
            return task.model_copy()

    def remove(self, task_id: int) -> bool:
        """Remove the task with the given id and persist.

        An unknown id leaves the state untouched.

        Args:
            task_id: The task ID

        Returns:
            True if removed, False if not found
        """
        logger.info(f"Removing task: '{task_id}'")
        with self._lock:
            index = next(
                (i for i, task in enumerate(self._state.tasks) if task.id == task_id),
                None,
            )
            if index is None:
                logger.info(f"Task '{task_id}' could not be removed as it was not found")
            else:
                del self._state.tasks[index]

            self._log_tasks()
            self._save()
            return index is not None

    def list_tasks(self) -> list[Task]:
        """List the current tasks in display order."""
        with self._lock:
            return [task.model_copy() for task in self._state.tasks]

    def debug_info(self) -> str:
        """Describe the environment for troubleshooting."""
        with self._lock:
            lines = [
                f"platform={platform.platform()}",
                f"cwd={os.getcwd()}",
                f"tasks_file={self._storage_path}",
                f"tasks_file_exists={self._storage_path.exists()}",
                f"task_count={len(self._state.tasks)}",
                f"next_task_id={self._state.next_task_id}",
            ]
        return "\n".join(lines)

    def _save(self) -> None:
        # Caller holds the lock.
        try:
            persistence.save(self._state, self._storage_path)
            logger.debug("Saving completed successfully.")
        except OSError as e:
            logger.error(f"Failed to save tasks to {self._storage_path}: {e}")

    def _log_tasks(self) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(f"Tasks ({len(self._state.tasks)}):")
        for task in self._state.tasks:
            logger.debug(f"    {task.id}: {task.description}")


# Singleton instance
_task_store: TaskStore | None = None


def get_task_store() -> TaskStore:
    """Get the singleton TaskStore instance."""
    global _task_store
    if _task_store is None:
        _task_store = TaskStore()
    return _task_store
