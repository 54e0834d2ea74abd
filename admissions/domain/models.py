"""Domain models for the admission catalog and ticket requests.

These are pure, immutable domain objects. The plain-mapping catalog format
(``description`` and ``priceInCents`` per record, add-ons under the
reserved ``extras`` key) is converted here and nowhere else.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from admissions.domain.errors import InvalidCatalogError, InvalidTicketRequestError
from admissions.domain.value_objects import Money

EXTRAS_KEY = "extras"
DESCRIPTION_KEY = "description"
PRICES_KEY = "priceInCents"


@dataclass(frozen=True)
class PriceTable:
    """Prices for one catalog record, keyed by entrant type.

    Stored as ``(entrant_type, Money)`` pairs in catalog order so the table
    stays hashable like the other value objects.
    """

    prices: tuple[tuple[str, Money], ...] = ()

    def __post_init__(self) -> None:
        pairs = self.prices.items() if isinstance(self.prices, Mapping) else self.prices
        object.__setattr__(self, "prices", tuple(dict(pairs).items()))

    @property
    def entrant_types(self) -> tuple[str, ...]:
        return tuple(entrant_type for entrant_type, _ in self.prices)

    def price_for(self, entrant_type: str) -> Money | None:
        for name, price in self.prices:
            if name == entrant_type:
                return price
        return None

    @classmethod
    def from_mapping(cls, raw: Any, path: str) -> Self:
        if not isinstance(raw, Mapping):
            raise InvalidCatalogError(path, "expected a mapping of entrant types to prices")
        prices = {}
        for entrant_type, cents in raw.items():
            entry_path = f"{path}.{entrant_type}"
            if not isinstance(entrant_type, str):
                raise InvalidCatalogError(entry_path, "entrant type must be a string")
            # bool is an int subclass
            if isinstance(cents, bool) or not isinstance(cents, int):
                raise InvalidCatalogError(entry_path, "price must be an integer number of cents")
            if cents < 0:
                raise InvalidCatalogError(entry_path, "price cannot be negative")
            prices[entrant_type] = Money.from_cents(cents)
        return cls(prices=prices)


def _record_fields(raw: Any, path: str) -> tuple[str, PriceTable]:
    if not isinstance(raw, Mapping):
        raise InvalidCatalogError(path, "expected a record mapping")
    description = raw.get(DESCRIPTION_KEY)
    if not isinstance(description, str):
        raise InvalidCatalogError(f"{path}.{DESCRIPTION_KEY}", "description must be a string")
    prices = PriceTable.from_mapping(raw.get(PRICES_KEY), f"{path}.{PRICES_KEY}")
    return description, prices


@dataclass(frozen=True)
class TicketCategory:
    """A purchasable ticket category, e.g. general admission."""

    name: str
    description: str
    prices: PriceTable

    @classmethod
    def from_mapping(cls, name: str, raw: Any) -> Self:
        description, prices = _record_fields(raw, name)
        return cls(name=name, description=description, prices=prices)


@dataclass(frozen=True)
class Extra:
    """An add-on that can be attached to any ticket."""

    name: str
    description: str
    prices: PriceTable

    @classmethod
    def from_mapping(cls, name: str, raw: Any) -> Self:
        description, prices = _record_fields(raw, f"{EXTRAS_KEY}.{name}")
        return cls(name=name, description=description, prices=prices)


@dataclass(frozen=True)
class Catalog:
    """Read-only price catalog: ticket categories plus the add-on sub-catalog."""

    categories: Mapping[str, TicketCategory] = field(default_factory=dict)
    extras: Mapping[str, Extra] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if EXTRAS_KEY in self.categories:
            raise InvalidCatalogError(EXTRAS_KEY, "reserved for add-ons, not a ticket category")
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def category(self, name: str) -> TicketCategory | None:
        """Return the ticket category, or None. ``extras`` is never a category."""
        if name == EXTRAS_KEY:
            return None
        return self.categories.get(name)

    def extra(self, name: str) -> Extra | None:
        return self.extras.get(name)

    @classmethod
    def from_mapping(cls, raw: Any) -> Self:
        """Build a catalog from its plain-mapping form.

        Raises:
            InvalidCatalogError: If any record is malformed.
        """
        if not isinstance(raw, Mapping):
            raise InvalidCatalogError("<root>", "expected a mapping of ticket categories")
        raw_extras = raw.get(EXTRAS_KEY, {})
        if not isinstance(raw_extras, Mapping):
            raise InvalidCatalogError(EXTRAS_KEY, "expected a mapping of extras")
        categories = {
            name: TicketCategory.from_mapping(name, record)
            for name, record in raw.items()
            if name != EXTRAS_KEY
        }
        extras = {name: Extra.from_mapping(name, record) for name, record in raw_extras.items()}
        return cls(categories=categories, extras=extras)


@dataclass(frozen=True)
class TicketRequest:
    """A single ticket a visitor wants to buy."""

    ticket_type: str
    entrant_type: str
    extras: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", tuple(self.extras))

    @classmethod
    def from_mapping(cls, raw: Any) -> Self:
        """Build a request from the wire form (``ticketType``, ``entrantType``, ``extras``).

        Raises:
            InvalidTicketRequestError: If a field is missing or has the wrong type.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            raise InvalidTicketRequestError("expected a mapping")
        ticket_type = raw.get("ticketType")
        entrant_type = raw.get("entrantType")
        extras = raw.get("extras", ())
        if not isinstance(ticket_type, str):
            raise InvalidTicketRequestError("'ticketType' must be a string")
        if not isinstance(entrant_type, str):
            raise InvalidTicketRequestError("'entrantType' must be a string")
        if isinstance(extras, str) or not isinstance(extras, Iterable):
            raise InvalidTicketRequestError("'extras' must be a list of strings")
        extras = tuple(extras)
        if not all(isinstance(extra, str) for extra in extras):
            raise InvalidTicketRequestError("'extras' must be a list of strings")
        return cls(ticket_type=ticket_type, entrant_type=entrant_type, extras=extras)
