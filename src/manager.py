"""
TASK RECORDER - Task Manager
============================
The boundary the presentation layer talks to. Owns one TaskStore for
the life of the process and turns core errors into user messages, so
a failed action always leaves the store in its last-known-good state.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from .errors import PersistenceError, TaskIndexError, ValidationError
from .persistence import TaskPersistence
from .schema import TaskDraft, TaskRecord
from .store import TaskStore

logger = logging.getLogger("taskrecorder")


class ActionResult(BaseModel):
    """Outcome of a user action, ready to display"""
    ok: bool
    message: str
    task: Optional[TaskRecord] = None


class TaskManager:
    """
    Task recorder facade.

    Usage:
        manager = TaskManager()
        manager.add_task("Buy milk", "2%  whole")
        manager.save_tasks("tasks.dat")
        manager.load_tasks("tasks.dat")
    """

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        persistence: Optional[TaskPersistence] = None
    ):
        self.store = store if store is not None else TaskStore()
        self.persistence = persistence if persistence is not None else TaskPersistence()

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, title: str, description: str) -> ActionResult:
        try:
            task = self.store.add(title, description)
        except ValidationError as e:
            logger.warning(f"Rejected task: {e}")
            return ActionResult(ok=False, message="Both title and description are required!")

        logger.info(f"➕ Added task: {task.title}")
        return ActionResult(ok=True, message=f"Task added: {task.title}", task=task)

    def delete_task(self, index: int) -> ActionResult:
        try:
            task = self.store.remove_at(index)
        except TaskIndexError as e:
            logger.warning(f"Delete ignored: {e}")
            return ActionResult(ok=False, message=f"No task at position {index}")

        logger.info(f"🗑️ Deleted task: {task.title}")
        return ActionResult(ok=True, message=f"Task deleted: {task.title}", task=task)

    def select_task(self, index: int) -> Optional[TaskRecord]:
        return self.store.get(index)

    def compose_new(self) -> TaskDraft:
        """Blank form contents for entering a new task"""
        return TaskDraft()

    def preview_existing(self, index: int) -> Optional[TaskDraft]:
        """Copy of a stored task for display; changes to it never reach the store"""
        task = self.store.get(index)
        if task is None:
            return None
        return TaskDraft.from_record(task)

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def save_tasks(self, path: Optional[Union[str, Path]] = None) -> ActionResult:
        try:
            self.persistence.save(self.store, path)
        except PersistenceError as e:
            logger.error(f"❌ Save failed: {e}")
            return ActionResult(ok=False, message=f"Error saving tasks: {e}")
        return ActionResult(ok=True, message="Tasks saved successfully!")

    def load_tasks(self, path: Optional[Union[str, Path]] = None) -> ActionResult:
        try:
            tasks = self.persistence.load(path)
        except PersistenceError as e:
            logger.error(f"❌ Load failed: {e}")
            return ActionResult(ok=False, message=f"Error loading tasks: {e}")

        self.store.replace_all(tasks)
        return ActionResult(ok=True, message="Tasks loaded successfully!")

    # ========================================
    # REPORTING
    # ========================================

    def list_titles(self) -> List[str]:
        return [task.title for task in self.store]

    def get_status_report(self) -> str:
        """Numbered listing of task titles, 1-based as shown to users"""
        if not self.store:
            return "📋 No tasks"

        lines = [f"📋 Tasks ({len(self.store)}):"]
        for number, task in enumerate(self.store, start=1):
            lines.append(f"  {number}. {task.title}")
        return "\n".join(lines)
