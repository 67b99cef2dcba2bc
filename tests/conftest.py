# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_manager import TaskManager

from .fakes import FixedClock, RecordingKeyValueStore, SequentialIds


@pytest.fixture()
def store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def manager(store: RecordingKeyValueStore) -> TaskManager:
    """TaskManager with deterministic ids (t1, t2, ...) and a fixed clock."""
    return TaskManager(store, id_factory=SequentialIds(), clock=FixedClock())


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/AppState.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path / "data",
        storage_backend="memory",
        storage_path=tmp_path / "data" / "tasks.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: RecordingKeyValueStore, manager: TaskManager) -> AppState:
    return AppState(settings=settings, store=store, manager=manager)
