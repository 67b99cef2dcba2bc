# src/task_tracker/tasks/task_codec.py

"""
JSON encoding of the whole task collection.

The collection is stored as one JSON array of records:
  [{"id": ..., "title": ..., "description": ..., "priority": ...,
    "createdAt": ..., "completed": false}, ...]
Keys are sorted so the same collection always produces the same string.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from .task_models import CorruptPersistedStateError, Task


def dump_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False, sort_keys=True)


def load_tasks(data: str) -> list[Task]:
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise CorruptPersistedStateError(f"stored tasks are not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise CorruptPersistedStateError(f"stored tasks must be a JSON array, got {type(raw).__name__}")

    tasks = [Task.from_record(item) for item in raw]
    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise CorruptPersistedStateError(f"duplicate task id {t.id!r} in stored tasks")
        seen.add(t.id)
    return tasks
