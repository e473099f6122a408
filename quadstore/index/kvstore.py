"""Durable key/value stores holding JSON values.

Both stores share one contract: ``get(key)`` returns the decoded value or
raises :class:`RecordNotFound`, and ``put(key, value)`` is durable once it
returns. Values must be JSON serializable; a ``TypeError`` from the encoder
propagates to the caller unchanged.
"""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from ..core import logger
from .errors import RecordNotFound

_SCHEMA = "CREATE TABLE IF NOT EXISTS records (key TEXT PRIMARY KEY, value TEXT NOT NULL)"


class SqliteStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()
        if self.path.suffix == "":
            # A bare directory-like path (e.g. ./data/db) holds a single database file.
            self.path.mkdir(parents=True, exist_ok=True)
            self._file = self.path / "records.sqlite3"
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path
        # Cross-thread use is serialized by the caller (see SerializedIndex).
        self._conn = sqlite3.connect(str(self._file), check_same_thread=False)
        self._conn.execute(_SCHEMA)
        self._conn.commit()
        logger.logger.debug("Opened store at %s", self._file)

    def get(self, key: str) -> Any:
        row = self._conn.execute("SELECT value FROM records WHERE key = ?", (key,)).fetchone()
        if row is None:
            raise RecordNotFound(key)
        return json.loads(row[0])

    def put(self, key: str, value: Any) -> None:
        raw = json.dumps(value)
        with self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO records (key, value) VALUES (?, ?)",
                (key, raw),
            )

    def keys(self, prefix: str = "") -> Iterator[str]:
        rows = self._conn.execute(
            "SELECT key FROM records WHERE substr(key, 1, ?) = ? ORDER BY key",
            (len(prefix), prefix),
        ).fetchall()
        for (key,) in rows:
            yield key

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SqliteStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class MemoryStore:
    """Process-local store; values are kept encoded so callers never share them."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self.reads = 0
        self.writes = 0

    def get(self, key: str) -> Any:
        self.reads += 1
        try:
            raw = self._data[key]
        except KeyError:
            raise RecordNotFound(key) from None
        return json.loads(raw)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)
        self.writes += 1

    def keys(self, prefix: str = "") -> Iterator[str]:
        for key in sorted(self._data):
            if key.startswith(prefix):
                yield key

    def close(self) -> None:
        pass

    def __enter__(self) -> "MemoryStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
