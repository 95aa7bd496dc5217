"""A persistent key-value store kept in an SQLite file."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable
from itertools import takewhile
from pathlib import Path

from .kvstore import KvStore, KvStoreError, Put, WriteOp, _check_op

_DB_FILE = "store.sqlite3"


class DiskKvStore(KvStore):
    """A store kept on disk inside the directory ``path``, created when missing."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        directory = Path(path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(directory / _DB_FILE)
            with self._conn:
                self._conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value BLOB NOT NULL)"
                )
        except (OSError, sqlite3.Error) as exc:
            raise KvStoreError(f"io error: {exc}") from exc

    def get(self, key: str) -> bytes | None:
        try:
            row = self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise KvStoreError() from exc
        return None if row is None else bytes(row[0])

    def update(self, ops: Iterable[WriteOp]) -> None:
        ops = list(ops)
        for op in ops:
            _check_op(op)
        try:
            with self._conn:
                for op in ops:
                    if isinstance(op, Put):
                        self._conn.execute(
                            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                            (op.key, op.value),
                        )
                    else:
                        self._conn.execute("DELETE FROM kv WHERE key = ?", (op.key,))
        except sqlite3.Error as exc:
            raise KvStoreError() from exc

    def pairs(self, prefix: str) -> dict[str, bytes]:
        try:
            rows = self._conn.execute(
                "SELECT key, value FROM kv WHERE key >= ? ORDER BY key", (prefix,)
            )
            return {
                key: bytes(value)
                for key, value in takewhile(lambda row: row[0].startswith(prefix), rows)
            }
        except sqlite3.Error as exc:
            raise KvStoreError() from exc

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> DiskKvStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()