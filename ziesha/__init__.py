"""Ledger primitives: money, SHA3 hashing, Merkle trees, Ed25519 keys, addresses, key layout and key-value stores."""

__version__ = "0.1.0"