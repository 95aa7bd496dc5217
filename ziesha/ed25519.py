"""Ed25519 signatures with keys derived from a SHA3 seed."""

from __future__ import annotations

from dataclasses import dataclass, field

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from .hashing import sha3_hash

_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P


class ParsePublicKeyError(ValueError):
    """Raised when a string is not a valid public key."""

    def __init__(self, message: str = "public key invalid") -> None:
        super().__init__(message)


def _is_valid_point(encoded: bytes) -> bool:
    """Check that a compressed point decodes to a curve point."""
    y = int.from_bytes(encoded, "little") & ((1 << 255) - 1)
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    if u == 0:
        return True
    return pow(u * v % _P, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte Ed25519 public key."""

    key: bytes

    def __post_init__(self) -> None:
        if len(self.key) != 32:
            raise ValueError("public key must be 32 bytes")

    @classmethod
    def parse(cls, text: str) -> PublicKey:
        """Parse a ``0x``-prefixed, byte-reversed hex public key."""
        if len(text) != 66 or not text.lower().startswith("0x"):
            raise ParsePublicKeyError()
        try:
            raw = bytes.fromhex(text[2:])
        except ValueError:
            raise ParsePublicKeyError() from None
        if len(raw) != 32 or not all(c in "0123456789abcdefABCDEF" for c in text[2:]):
            raise ParsePublicKeyError()
        key = raw[::-1]
        if not _is_valid_point(key):
            raise ParsePublicKeyError()
        return cls(key)

    def __str__(self) -> str:
        return "0x" + self.key[::-1].hex()


@dataclass(frozen=True, repr=False)
class PrivateKey:
    """An Ed25519 private key held as its 32-byte seed."""

    seed: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.seed) != 32:
            raise ValueError("private key seed must be 32 bytes")

    def __repr__(self) -> str:
        return "PrivateKey(...)"

    @property
    def _signing_key(self) -> SigningKey:
        return SigningKey(self.seed)

    def public_key(self) -> PublicKey:
        return PublicKey(bytes(self._signing_key.verify_key))


@dataclass(frozen=True)
class Signature:
    """A 64-byte Ed25519 signature."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 64:
            raise ValueError("signature must be 64 bytes")


def generate_keys(seed: bytes) -> tuple[PublicKey, PrivateKey]:
    """Derive a key pair deterministically from ``seed``."""
    secret = bytearray(sha3_hash(seed))
    secret[31] &= 0x7F
    private_key = PrivateKey(bytes(secret))
    return private_key.public_key(), private_key


def sign(private_key: PrivateKey, message: bytes) -> Signature:
    return Signature(private_key._signing_key.sign(bytes(message)).signature)


def verify(public_key: PublicKey, message: bytes, signature: Signature) -> bool:
    try:
        VerifyKey(public_key.key).verify(bytes(message), signature.value)
    except (CryptoError, ValueError):
        return False
    return True