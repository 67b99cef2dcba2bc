# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..core.errors import CorruptPersistedStateError
from ..core.ids import new_task_id, now_timestamp
from ..core.ports import Clock, IdFactory

DEFAULT_PRIORITY = "Medium"


class Priority(StrEnum):
    """
    Common priority labels.

    Priority is an open label set: Task accepts any string,
    these are only the values the console and demo use.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TaskFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw)
        except ValueError:
            return cls.ALL


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    priority: str
    created_at: str
    completed: bool = False

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        priority: str | None = DEFAULT_PRIORITY,
        *,
        id_factory: IdFactory = new_task_id,
        clock: Clock = now_timestamp,
    ) -> Task:
        """New task with a fresh id and creation timestamp. No content validation."""
        return cls(
            id=id_factory(),
            title=title,
            description=description,
            priority=DEFAULT_PRIORITY if priority is None else str(priority),
            created_at=clock(),
            completed=False,
        )

    @classmethod
    def from_record(cls, record: Any) -> Task:
        """
        Rebuild a persisted task.

        Every field is taken as stored; id and created_at are never regenerated.
        """
        if not isinstance(record, Mapping):
            raise CorruptPersistedStateError(f"task record must be an object, got {type(record).__name__}")

        values: dict[str, Any] = {}
        for field_name, key, expected in _RECORD_FIELDS:
            if key not in record:
                raise CorruptPersistedStateError(f"task record is missing {key!r}")
            value = record[key]
            if not isinstance(value, expected):
                raise CorruptPersistedStateError(
                    f"task record field {key!r} must be {expected.__name__}, got {type(value).__name__}"
                )
            values[field_name] = value
        return cls(**values)

    def to_record(self) -> dict[str, Any]:
        return {key: getattr(self, field_name) for field_name, key, _ in _RECORD_FIELDS}

    def toggle_complete(self) -> None:
        self.completed = not self.completed

    def describe(self) -> str:
        status = "✅ Done" if self.completed else "❌ Pending"
        return f"{self.title} [{self.priority}] - {status}"

    def __str__(self) -> str:
        return self.describe()


# (attribute, persisted key, type)
_RECORD_FIELDS: tuple[tuple[str, str, type], ...] = (
    ("id", "id", str),
    ("title", "title", str),
    ("description", "description", str),
    ("priority", "priority", str),
    ("created_at", "createdAt", str),
    ("completed", "completed", bool),
)
