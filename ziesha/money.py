"""Fixed-point currency amounts with nine decimal places."""

from __future__ import annotations

import re
from dataclasses import dataclass

SYMBOL = "ℤ"
UNIT_ZEROS = 9
UNIT = 10**UNIT_ZEROS
MAX_VALUE = 2**64 - 1

_UNSIGNED = re.compile(r"\+?[0-9]+")


class ParseMoneyError(ValueError):
    """Raised when a string is not a valid amount of money."""

    def __init__(self, message: str = "money invalid") -> None:
        super().__init__(message)


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseMoneyError()
    value = int(text)
    if value > MAX_VALUE:
        raise ParseMoneyError()
    return value


@dataclass(frozen=True, order=True)
class Money:
    """An amount of money counted in the smallest indivisible unit."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("money value must be an integer")
        if not 0 <= self.value <= MAX_VALUE:
            raise OverflowError("money value out of range")

    @classmethod
    def parse(cls, text: str) -> Money:
        """Parse a decimal amount such as ``"12.5"`` into money."""
        s = text.strip()
        dot_pos = s.find(".")
        if dot_pos < 0:
            value = _parse_u64(s) * UNIT
            if value > MAX_VALUE:
                raise ParseMoneyError()
            return cls(value)
        if s == ".":
            raise ParseMoneyError()
        decimals = len(s) - 1 - dot_pos
        if decimals > UNIT_ZEROS:
            raise ParseMoneyError()
        padded = s + "0" * (UNIT_ZEROS - decimals)
        return cls(_parse_u64(padded[:dot_pos] + padded[dot_pos + 1 :]))

    def __str__(self) -> str:
        digits = str(self.value).rjust(UNIT_ZEROS + 1, "0")
        split = len(digits) - UNIT_ZEROS
        text = (digits[:split] + "." + digits[split:]).rstrip("0")
        if text.endswith("."):
            text += "0"
        return text + SYMBOL

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value + other.value)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value - other.value)

    def __floordiv__(self, divisor: int) -> Money:
        if not isinstance(divisor, int):
            return NotImplemented
        return Money(self.value // divisor)