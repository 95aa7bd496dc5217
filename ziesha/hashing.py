"""The SHA3-256 hash used across the chain."""

import hashlib

DIGEST_SIZE = 32


def sha3_hash(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""
    return hashlib.sha3_256(bytes(data)).digest()