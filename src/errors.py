"""
TASK RECORDER - Error Types
===========================
Every failure the core reports derives from TaskError so the
presentation layer can catch one type and show its message.
"""

from pathlib import Path
from typing import Optional, Union


class TaskError(Exception):
    """Base class for task recorder errors"""


class ValidationError(TaskError, ValueError):
    """Title or description empty, or a non-TaskRecord handed to the store"""


class TaskIndexError(TaskError, IndexError):
    """Index outside the current bounds of the store"""

    def __init__(self, index: int, size: int):
        super().__init__(f"No task at index {index} (store holds {size})")
        self.index = index
        self.size = size


class PersistenceError(TaskError):
    """I/O failure on save/load, or a file that is not a task snapshot"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
