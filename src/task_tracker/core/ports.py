# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskManager depends on these Protocols instead of concrete implementations,
so storage backends stay swappable and tests can use in-memory fakes.
"""

from typing import Callable, Protocol

IdFactory = Callable[[], str]
Clock = Callable[[], str]
# Clock returns a human-readable timestamp string (see core.ids.now_timestamp).


class KeyValueStore(Protocol):
    """
    Minimal string -> string storage (localStorage-like).

    No expiry, no transactions. get_item returns None for missing keys.
    """

    def set_item(self, key: str, value: str) -> None: ...
    def get_item(self, key: str) -> str | None: ...
    def clear(self) -> None: ...
