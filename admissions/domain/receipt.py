"""Priced tickets and the purchase receipt built from them."""

from dataclasses import dataclass

from admissions.domain.models import TicketCategory, TicketRequest
from admissions.domain.value_objects import Money

RECEIPT_HEADER = "Thank you for visiting the Dinosaur Museum!"
RECEIPT_DIVIDER = "-" * 43


def capitalize_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` this does not lowercase the remainder.
    """
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class Quote:
    """A ticket request that passed validation, with its resolved prices."""

    request: TicketRequest
    category: TicketCategory
    base_price: Money
    extra_prices: tuple[Money, ...] = ()

    @property
    def extras_price(self) -> Money:
        return sum(self.extra_prices, Money.zero())

    @property
    def total(self) -> Money:
        return self.base_price + self.extras_price


@dataclass(frozen=True)
class ReceiptLine:
    """One ticket on the receipt."""

    entrant_type: str
    description: str
    price: Money
    extras: tuple[str, ...] = ()

    @classmethod
    def from_quote(cls, quote: Quote) -> "ReceiptLine":
        return cls(
            entrant_type=quote.request.entrant_type,
            description=quote.category.description,
            price=quote.total,
            extras=quote.request.extras,
        )

    def render(self) -> str:
        line = f"{capitalize_first(self.entrant_type)} {self.description}: ${self.price}"
        if self.extras:
            access = ", ".join(f"{capitalize_first(extra)} Access" for extra in self.extras)
            line += f" ({access})"
        return line + "\n"


@dataclass(frozen=True)
class Receipt:
    """A completed purchase: every ticket line plus the total."""

    lines: tuple[ReceiptLine, ...] = ()
    total: Money = Money.zero()

    @classmethod
    def from_quotes(cls, quotes: list[Quote]) -> "Receipt":
        lines = tuple(ReceiptLine.from_quote(quote) for quote in quotes)
        total = sum((line.price for line in lines), Money.zero())
        return cls(lines=lines, total=total)

    def render(self) -> str:
        parts = [f"{RECEIPT_HEADER}\n", f"{RECEIPT_DIVIDER}\n"]
        parts.extend(line.render() for line in self.lines)
        parts.append(f"{RECEIPT_DIVIDER}\n")
        parts.append(f"TOTAL: ${self.total}")
        return "".join(parts)
