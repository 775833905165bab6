# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable, Union

Number = Union[int, float]


class Money:
    """
    A monetary amount held as an integer count of cents.

    Ledger balances are accumulated over many entries; keeping the running
    total in integer minor units means the walk never drifts the way repeated
    float additions do. Values come in and go out as plain floats.
    """

    __slots__ = ("cents",)

    def __init__(self, amount: Union[Number, str, None] = 0):
        """Initialize from a major-unit amount (e.g. 20000 or 19999.5)."""
        if amount is None:
            amount = 0
        self.cents = int(round(float(amount) * 100))

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create a Money object from a cent value."""
        obj = cls.__new__(cls)
        obj.cents = int(cents)
        return obj

    @classmethod
    def total(cls, amounts: Iterable[Union["Money", Number]]) -> "Money":
        """Sum amounts exactly."""
        cents = 0
        for amount in amounts:
            cents += _to_cents(amount)
        return cls.from_cents(cents)

    def to_float(self) -> float:
        """Convert the internal cents representation to a major-unit float."""
        return self.cents / 100

    def clamp_positive(self) -> "Money":
        """Return self when positive, otherwise zero."""
        return self if self.cents > 0 else Money.from_cents(0)

    def __repr__(self) -> str:
        return f"Money({self.to_float():.2f})"

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.cents != 0

    def __hash__(self) -> int:
        return hash(self.cents)

    def __neg__(self) -> "Money":
        return Money.from_cents(-self.cents)

    def __abs__(self) -> "Money":
        return Money.from_cents(abs(self.cents))

    def __add__(self, other: Union["Money", Number]) -> "Money":
        return Money.from_cents(self.cents + _to_cents(other))

    def __radd__(self, other: Number) -> "Money":
        return self.__add__(other)

    def __sub__(self, other: Union["Money", Number]) -> "Money":
        return Money.from_cents(self.cents - _to_cents(other))

    def __rsub__(self, other: Number) -> "Money":
        return Money.from_cents(_to_cents(other) - self.cents)

    def __mul__(self, other: Number) -> "Money":
        """Multiply by a scalar, rounding half to even on the cent."""
        if isinstance(other, (int, float)):
            return Money.from_cents(int(round(self.cents * other)))
        return NotImplemented

    def __rmul__(self, other: Number) -> "Money":
        return self.__mul__(other)

    # Comparison methods
    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Money, int, float)):
            return self.cents == _to_cents(other)
        return NotImplemented

    def __lt__(self, other: Union["Money", Number]) -> bool:
        return self.cents < _to_cents(other)

    def __le__(self, other: Union["Money", Number]) -> bool:
        return self.cents <= _to_cents(other)

    def __gt__(self, other: Union["Money", Number]) -> bool:
        return self.cents > _to_cents(other)

    def __ge__(self, other: Union["Money", Number]) -> bool:
        return self.cents >= _to_cents(other)


def _to_cents(value: Union[Money, Number]) -> int:
    if isinstance(value, Money):
        return value.cents
    return int(round(float(value) * 100))
