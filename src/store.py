"""
TASK RECORDER - Task Store
==========================
Ordered in-memory collection of TaskRecord. Position is the only
identity a task has; indices shift down when a task is removed.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from .errors import TaskIndexError, ValidationError
from .schema import TaskRecord

logger = logging.getLogger("taskrecorder.store")


class TaskStore:
    """
    In-memory task list.

    Removal is strict: any index outside 0 <= index < len(store)
    raises TaskIndexError, negative indices included.
    """

    def __init__(self, tasks: Optional[Iterable[TaskRecord]] = None):
        self._tasks: List[TaskRecord] = []
        if tasks is not None:
            self.replace_all(tasks)

    # ========================================
    # MUTATION
    # ========================================

    def add(self, title: str, description: str) -> TaskRecord:
        """Append a new task; both fields must be non-empty after trimming"""
        try:
            record = TaskRecord(title=title, description=description)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ValidationError(
                f"Both title and description are required (invalid: {', '.join(fields)})"
            ) from e

        self._tasks.append(record)
        logger.debug(f"Appended task #{len(self._tasks) - 1}: {record.title!r}")
        return record

    def remove_at(self, index: int) -> TaskRecord:
        """Remove and return the task at index"""
        if not self._in_bounds(index):
            raise TaskIndexError(index, len(self._tasks))
        record = self._tasks.pop(index)
        logger.debug(f"Removed task #{index}: {record.title!r}")
        return record

    def replace_all(self, tasks: Iterable[TaskRecord]) -> None:
        """Install tasks wholesale; nothing changes if any element is invalid"""
        incoming = list(tasks)
        for position, task in enumerate(incoming):
            if not isinstance(task, TaskRecord):
                raise ValidationError(
                    f"Item {position} is {type(task).__name__}, expected TaskRecord"
                )
        self._tasks = incoming
        logger.debug(f"Replaced store contents with {len(incoming)} tasks")

    # ========================================
    # QUERIES
    # ========================================

    def get(self, index: int) -> Optional[TaskRecord]:
        if not self._in_bounds(index):
            return None
        return self._tasks[index]

    def all(self) -> Tuple[TaskRecord, ...]:
        return tuple(self._tasks)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"TaskStore({len(self._tasks)} tasks)"
