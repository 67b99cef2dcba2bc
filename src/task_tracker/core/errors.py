# src/task_tracker/core/errors.py

from __future__ import annotations


class CorruptPersistedStateError(ValueError):
    """Stored task data could not be read back."""
