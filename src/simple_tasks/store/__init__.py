"""Storage module for task state."""

from simple_tasks.store.persistence import load, resolve_path, save
from simple_tasks.store.tasks import TaskStore, get_task_store

__all__ = [
    "TaskStore",
    "get_task_store",
    "load",
    "resolve_path",
    "save",
]
