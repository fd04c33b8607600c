"""
TASK RECORDER - Persistence
===========================
Whole-store snapshots in a single JSON file.

save() writes to a temp file beside the target and renames it over the target,
so a failed save never truncates the previous snapshot. load() only
decodes; swapping the result into a store is the caller's job.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .errors import PersistenceError
from .schema import TaskRecord, TaskSnapshot
from .store import TaskStore

logger = logging.getLogger("taskrecorder.persistence")

DEFAULT_TASKS_FILE = "tasks.dat"

PathLike = Union[str, Path]


class TaskPersistence:
    """Reads and writes TaskStore snapshots; holds no store reference"""

    def __init__(self, default_path: PathLike = DEFAULT_TASKS_FILE):
        self.default_path = Path(default_path)

    def _resolve(self, path: Optional[PathLike]) -> Path:
        return Path(path) if path is not None else self.default_path

    # ========================================
    # SAVE
    # ========================================

    def save(self, store: TaskStore, destination: Optional[PathLike] = None) -> Path:
        """Write every task in store to destination, replacing it atomically"""
        path = self._resolve(destination)
        snapshot = TaskSnapshot(tasks=list(store.all()))
        payload = snapshot.model_dump_json(indent=2)

        tmp_path: Optional[Path] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # short random name so it fits wherever the destination name fits
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tasks-", suffix=".tmp")
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                self._discard(tmp_path)
            raise PersistenceError(f"Cannot write {path}: {e.strerror or e}", path) from e

        logger.info(f"💾 Saved {len(snapshot.tasks)} tasks to {path}")
        return path

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove temp file {tmp_path}: {e}")

    # ========================================
    # LOAD
    # ========================================

    def load(self, source: Optional[PathLike] = None) -> List[TaskRecord]:
        """Decode the snapshot at source into tasks in their saved order"""
        path = self._resolve(source)

        try:
            raw = path.read_bytes()
        except FileNotFoundError as e:
            raise PersistenceError(f"No task file at {path}", path) from e
        except OSError as e:
            raise PersistenceError(f"Cannot read {path}: {e.strerror or e}", path) from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceError(f"{path} is not a task file (not UTF-8 text)", path) from e

        try:
            snapshot = TaskSnapshot.model_validate_json(text)
        except PydanticValidationError as e:
            first = e.errors()[0]
            where = ".".join(str(part) for part in first["loc"]) or "document"
            raise PersistenceError(
                f"{path} is not a valid task file ({where}: {first['msg']})", path
            ) from e

        logger.info(f"📂 Loaded {len(snapshot.tasks)} tasks from {path}")
        return list(snapshot.tasks)
