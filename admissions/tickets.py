"""Plain-value entry points for pricing and receipts.

Callers that hold the catalog as nested dicts and tickets as
``{"ticketType", "entrantType", "extras"}`` dicts use these. A rejected
ticket comes back as its message string; malformed input data raises
``DomainError``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from admissions.domain.errors import PricingError
from admissions.domain.models import Catalog, TicketRequest
from admissions.services.admission_service import AdmissionService


def _as_catalog(catalog: Catalog | Mapping[str, Any]) -> Catalog:
    if isinstance(catalog, Catalog):
        return catalog
    return Catalog.from_mapping(catalog)


def resolve_price(
    catalog: Catalog | Mapping[str, Any],
    ticket: TicketRequest | Mapping[str, Any],
) -> int | str:
    """Return the ticket price in cents, or the error message."""
    service = AdmissionService(_as_catalog(catalog))
    result = service.resolve_price(TicketRequest.from_mapping(ticket))
    if isinstance(result, PricingError):
        return result.message
    return result.total.cents


def build_receipt(
    catalog: Catalog | Mapping[str, Any],
    purchases: Iterable[TicketRequest | Mapping[str, Any]],
) -> str:
    """Return the rendered receipt, or the first error message encountered."""
    service = AdmissionService(_as_catalog(catalog))
    result = service.build_receipt(TicketRequest.from_mapping(p) for p in purchases)
    if isinstance(result, PricingError):
        return result.message
    return result.render()
