# src/task_tracker/core/ids.py

"""Id and timestamp helpers shared by the task layer."""

from __future__ import annotations

import secrets
import string
from datetime import datetime

_ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 8


def new_task_id() -> str:
    """Random base36 id, e.g. 'k3f9a0xq'."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


def now_timestamp() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")
