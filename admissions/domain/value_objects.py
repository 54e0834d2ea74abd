"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Self

# Cents are two decimal places below dollars.
CENTS_EXPONENT = 2


def _shift(value: Decimal, places: int) -> Decimal:
    """Move the decimal point without rounding, whatever the context precision."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


@dataclass(frozen=True)
class Money:
    """Price representation with validation.

    Amounts are held in major units (dollars). Catalog prices arrive in
    minor units and go through ``from_cents``. Conversions and sums are
    exact for any size of amount.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal(0))

    @classmethod
    def from_cents(cls, cents: int) -> Self:
        return cls(amount=_shift(Decimal(cents), -CENTS_EXPONENT))

    @property
    def cents(self) -> int:
        return int(_shift(self.amount, CENTS_EXPONENT))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        left, right = self.amount, other.amount
        span = max(left.adjusted(), right.adjusted()) - min(
            left.as_tuple().exponent, right.as_tuple().exponent
        )
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, span + 2)
            return Money(amount=left + right)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
