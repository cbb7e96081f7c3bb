# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from simple_tasks.main import app
from simple_tasks.store.tasks import TaskStore, get_task_store


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    """Tasks file location inside the per-test tmp dir (not created yet)."""
    return tmp_path / ".tasks"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture()
def client(store: TaskStore):
    """
    TestClient wired to the per-test store.

    The singleton is never touched, so nothing is written to the real
    home directory.
    """
    app.dependency_overrides[get_task_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
