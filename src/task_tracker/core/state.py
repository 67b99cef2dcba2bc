# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..core.ports import KeyValueStore
from ..tasks.task_manager import TaskManager


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    store: KeyValueStore
    manager: TaskManager
