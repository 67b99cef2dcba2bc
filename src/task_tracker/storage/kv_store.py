# src/task_tracker/storage/kv_store.py

"""
Key-value stores satisfying core.ports.KeyValueStore.

- InMemoryKeyValueStore: per-instance dict (tests, demo)
- JsonFileKeyValueStore: one JSON object on disk, atomic replace on write
- SqliteKeyValueStore: single `kv` table, one short-lived connection per call
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
from pathlib import Path

from ..core.errors import CorruptPersistedStateError

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def clear(self) -> None:
        self._data.clear()


class JsonFileKeyValueStore:
    """
    File-backed store.

    The whole mapping is rewritten on every set_item via a temp file + os.replace,
    so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileKeyValueStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text("utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptPersistedStateError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CorruptPersistedStateError(f"{self._path} does not contain a JSON object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise CorruptPersistedStateError(
                    f"{self._path}: value for key {key!r} must be a string, got {type(value).__name__}"
                )
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def clear(self) -> None:
        self._write_all({})


class SqliteKeyValueStore:
    """
    SQLite-backed store.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteKeyValueStore ready db=%s", self._db_path)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def get_item(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
            return None if row is None else str(row[0])
        finally:
            conn.close()

    def clear(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv")
            conn.commit()
        finally:
            conn.close()
