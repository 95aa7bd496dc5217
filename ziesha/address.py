"""Account addresses and account records."""

from __future__ import annotations

from dataclasses import dataclass

from .ed25519 import ParsePublicKeyError, PublicKey
from .money import Money


class ParseAddressError(ValueError):
    """Raised when a string is not a valid address."""

    def __init__(self, message: str = "address invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Address:
    """Either the treasury or the holder of a public key."""

    public_key: PublicKey | None = None

    @classmethod
    def treasury(cls) -> Address:
        return cls(None)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse a public-key address; the treasury has no textual form to parse."""
        try:
            return cls(PublicKey.parse(text))
        except ParsePublicKeyError:
            raise ParseAddressError() from None

    def is_treasury(self) -> bool:
        return self.public_key is None

    def __str__(self) -> str:
        return "Treasury" if self.public_key is None else str(self.public_key)


@dataclass
class Account:
    balance: Money = Money()
    nonce: int = 0


@dataclass
class ZkAccount:
    nonce: int = 0