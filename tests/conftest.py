# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskrecorder import TaskManager, TaskPersistence, TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.dat"


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def three_tasks() -> TaskStore:
    s = TaskStore()
    s.add("first", "one")
    s.add("second", "two")
    s.add("third", "three")
    return s


@pytest.fixture()
def persistence(tasks_path: Path) -> TaskPersistence:
    return TaskPersistence(default_path=tasks_path)


@pytest.fixture()
def manager(persistence: TaskPersistence) -> TaskManager:
    """Manager with an empty store, saving to a per-test tmp file by default."""
    return TaskManager(persistence=persistence)
