from admissions.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidCatalogError,
    InvalidTicketRequestError,
    PricingError,
)
from admissions.domain.models import Catalog, Extra, PriceTable, TicketCategory, TicketRequest
from admissions.domain.receipt import Quote, Receipt, ReceiptLine, capitalize_first
from admissions.domain.value_objects import Money

__all__ = [
    "Catalog",
    "TicketCategory",
    "Extra",
    "PriceTable",
    "TicketRequest",
    "Quote",
    "Receipt",
    "ReceiptLine",
    "Money",
    "ErrorCode",
    "PricingError",
    "DomainError",
    "InvalidCatalogError",
    "InvalidTicketRequestError",
    "capitalize_first",
]
