"""
TASK RECORDER - Title + Description Task List
=============================================

An ordered in-memory task list with whole-list snapshots on disk.

Usage:
    from taskrecorder import TaskManager

    manager = TaskManager()
    manager.add_task("Buy milk", "2%  whole")
    manager.add_task("Pay bills", "due Friday\\nmulti-line")
    manager.save_tasks("tasks.dat")

    # Later, in a fresh process
    manager = TaskManager()
    result = manager.load_tasks("tasks.dat")
    print(result.message)
    print(manager.get_status_report())
"""

from .errors import (
    TaskError,
    ValidationError,
    TaskIndexError,
    PersistenceError
)

from .schema import (
    TaskRecord,
    TaskDraft,
    TaskSnapshot,
    SNAPSHOT_VERSION
)

from .store import TaskStore
from .persistence import TaskPersistence, DEFAULT_TASKS_FILE
from .manager import TaskManager, ActionResult

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "ActionResult",
    "TaskStore",
    "TaskPersistence",
    "TaskRecord",
    "TaskDraft",
    "TaskSnapshot",
    "SNAPSHOT_VERSION",
    "DEFAULT_TASKS_FILE",
    "TaskError",
    "ValidationError",
    "TaskIndexError",
    "PersistenceError"
]
