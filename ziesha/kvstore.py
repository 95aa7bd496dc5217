"""Key-value stores that hold the chain state, in memory or layered over another store."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from .hashing import sha3_hash


class KvStoreError(Exception):
    """Raised when a key-value store fails to read or write."""

    def __init__(self, message: str = "kvstore failure") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Put:
    """Write ``value`` under ``key``."""

    key: str
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class Remove:
    """Delete ``key``."""

    key: str


WriteOp = Put | Remove


def _encode_len(n: int) -> bytes:
    return struct.pack("<Q", n)


def _encode_pairs(items: list[tuple[str, bytes]]) -> bytes:
    """Encode sorted key/value pairs with 64-bit little-endian length prefixes."""
    parts = [_encode_len(len(items))]
    for key, value in items:
        raw_key = key.encode("utf-8")
        parts += [_encode_len(len(raw_key)), raw_key, _encode_len(len(value)), value]
    return b"".join(parts)


class KvStore(ABC):
    """A store mapping string keys to byte values."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value under ``key``, or None when it is absent."""

    @abstractmethod
    def update(self, ops: Iterable[WriteOp]) -> None:
        """Apply the write operations in order."""

    @abstractmethod
    def pairs(self, prefix: str) -> dict[str, bytes]:
        """Return every entry whose key starts with ``prefix``."""

    def checksum(self) -> bytes:
        """Hash of all entries, sorted by key."""
        return sha3_hash(_encode_pairs(sorted(self.pairs("").items())))

    def mirror(self) -> RamMirrorKvStore:
        """Return an in-memory layer over this store that leaves it untouched."""
        return RamMirrorKvStore(self)


def _check_op(op: object) -> None:
    if not isinstance(op, (Put, Remove)):
        raise TypeError(f"not a write operation: {op!r}")


class RamKvStore(KvStore):
    """A store held entirely in a dictionary."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in ops:
            _check_op(op)
            if isinstance(op, Put):
                self._data[op.key] = op.value
            else:
                self._data.pop(op.key, None)

    def pairs(self, prefix: str) -> dict[str, bytes]:
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}


class RamMirrorKvStore(KvStore):
    """Records writes in memory on top of a read-only view of another store."""

    def __init__(self, store: KvStore) -> None:
        self._store = store
        self._overwrite: dict[str, bytes | None] = {}

    def get(self, key: str) -> bytes | None:
        if key in self._overwrite:
            return self._overwrite[key]
        return self._store.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in ops:
            _check_op(op)
            self._overwrite[op.key] = op.value if isinstance(op, Put) else None

    def pairs(self, prefix: str) -> dict[str, bytes]:
        result = self._store.pairs(prefix)
        for key, value in self._overwrite.items():
            if value is None:
                result.pop(key, None)
            elif key.startswith(prefix):
                result[key] = value
        return result

    def rollback(self) -> list[WriteOp]:
        """Operations that restore the underlying store's values for every touched key."""
        ops: list[WriteOp] = []
        for key in self._overwrite:
            original = self._store.get(key)
            ops.append(Remove(key) if original is None else Put(key, original))
        return ops

    def to_ops(self) -> list[WriteOp]:
        """Operations that apply the recorded writes to the underlying store."""
        return [
            Remove(key) if value is None else Put(key, value)
            for key, value in self._overwrite.items()
        ]