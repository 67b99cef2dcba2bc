# src/task_tracker/tasks/task_manager.py

from __future__ import annotations

import logging

from ..core.ids import new_task_id, now_timestamp
from ..core.ports import Clock, IdFactory, KeyValueStore
from .task_codec import dump_tasks, load_tasks
from .task_models import CorruptPersistedStateError, Task, TaskFilter

logger = logging.getLogger(__name__)

STORAGE_KEY = "tasks"


class TaskManager:
    """
    Owns the task list and keeps the store in sync with it.

    Every mutation rewrites the full collection under STORAGE_KEY
    (snapshot, not a diff). Tasks keep insertion order.

    Not thread-safe: callers sharing an instance must lock around it.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        id_factory: IdFactory = new_task_id,
        clock: Clock = now_timestamp,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._clock = clock
        self._tasks: list[Task] = []
        # Every id this manager has seen, so deleted ids are never handed out again.
        self._issued_ids: set[str] = set()
        self.load_from_storage()

    # ---- queries ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def filter_tasks(self, filter: str | None = TaskFilter.ALL) -> list[Task]:
        flt = TaskFilter.parse(filter)
        if flt is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.completed]
        if flt is TaskFilter.PENDING:
            return [t for t in self._tasks if not t.completed]
        return list(self._tasks)

    def list_tasks(self, filter: str | None = TaskFilter.ALL) -> list[str]:
        """Display strings for tasks matching `filter`; unknown filters mean "all"."""
        return [t.describe() for t in self.filter_tasks(filter)]

    # ---- mutations ----

    def add_task(self, title: str, description: str = "", priority: str | None = None) -> Task:
        task = Task.create(
            title,
            description,
            priority,
            id_factory=self._next_id,
            clock=self._clock,
        )
        self._tasks.append(task)
        self.save_to_storage()
        logger.debug("Task added id=%s priority=%s", task.id, task.priority)
        return task

    def remove_task(self, task_id: str) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        self.save_to_storage()
        logger.debug("Task remove id=%s removed=%s", task_id, before - len(self._tasks))

    def toggle_task_completion(self, task_id: str) -> Task | None:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Toggle ignored, no task id=%s", task_id)
            return None
        task.toggle_complete()
        self.save_to_storage()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def clear(self) -> None:
        """Drop every task and wipe the store. Issued ids stay reserved."""
        self._tasks = []
        self._store.clear()
        logger.info("All tasks cleared.")

    # ---- persistence ----

    def save_to_storage(self) -> None:
        self._store.set_item(STORAGE_KEY, dump_tasks(self._tasks))

    def load_from_storage(self) -> None:
        try:
            data = self._store.get_item(STORAGE_KEY)
            if not data:
                return
            tasks = load_tasks(data)
        except CorruptPersistedStateError:
            logger.error("Stored tasks under key=%r are corrupt.", STORAGE_KEY)
            raise
        self._tasks = tasks
        self._issued_ids.update(t.id for t in tasks)
        logger.info("Loaded %d task(s) from storage.", len(tasks))

    # ---- helpers ----

    def _next_id(self) -> str:
        while True:
            task_id = self._id_factory()
            if task_id not in self._issued_ids:
                self._issued_ids.add(task_id)
                return task_id
