"""
TASK RECORDER - Schema Definition
=================================
Task record and the versioned snapshot envelope written to disk.
Only record fields are serialised, never the in-memory store.
"""

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SNAPSHOT_FORMAT = "taskrecorder"
SNAPSHOT_VERSION = 1


class TaskRecord(BaseModel):
    """A single task: title and description, immutable once created"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    description: str

    @field_validator("title", "description")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class TaskDraft(BaseModel):
    """
    Editable form contents shown by the presentation layer.

    Unlike TaskRecord a draft is mutable and unvalidated; it is only
    turned into a record when handed to TaskStore.add.
    """
    title: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, record: TaskRecord) -> "TaskDraft":
        return cls(title=record.title, description=record.description)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskSnapshot(BaseModel):
    """On-disk envelope: one whole-store snapshot per file"""
    model_config = ConfigDict(extra="forbid")

    format: Literal["taskrecorder"] = SNAPSHOT_FORMAT
    version: int = SNAPSHOT_VERSION
    saved_at: datetime = Field(default_factory=_utcnow)
    tasks: List[TaskRecord] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def _supported_version(cls, value: int) -> int:
        if value != SNAPSHOT_VERSION:
            raise ValueError(
                f"unsupported snapshot version {value} (expected {SNAPSHOT_VERSION})"
            )
        return value
