# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value store backend and wires a TaskManager on top of it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import STORAGE_BACKENDS, get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, SqliteKeyValueStore
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def create_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "memory")).lower()
    path = Path(getattr(settings, "storage_path", "tasks.json"))

    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "json":
        return JsonFileKeyValueStore(path)
    if backend == "sqlite":
        return SqliteKeyValueStore(path)
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    store = create_store(settings)
    manager = TaskManager(store)
    logger.info(
        "Task manager ready backend=%s tasks=%d",
        getattr(settings, "storage_backend", "memory"),
        len(manager),
    )
    return AppState(settings=settings, store=store, manager=manager)
