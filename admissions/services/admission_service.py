"""Admission service - all pricing logic lives here.

Services:
- Depend only on domain models
- Validate requests against the catalog
- Return domain results, never raise for bad caller input
"""

import logging
from collections.abc import Iterable

from admissions.domain.errors import ErrorCode, PricingError
from admissions.domain.models import Catalog, TicketRequest
from admissions.domain.receipt import Quote, Receipt

logger = logging.getLogger(__name__)


class AdmissionService:
    """Service for pricing tickets against one catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def resolve_price(self, request: TicketRequest) -> Quote | PricingError:
        """Price a single ticket.

        Checks run in a fixed order and stop at the first failure: ticket
        type, then entrant type, then each extra in request order.
        """
        category = self._catalog.category(request.ticket_type)
        if category is None:
            return self._reject(ErrorCode.UNKNOWN_TICKET_TYPE, request.ticket_type, request)

        base_price = category.prices.price_for(request.entrant_type)
        if base_price is None:
            return self._reject(ErrorCode.UNKNOWN_ENTRANT_TYPE, request.entrant_type, request)

        extra_prices = []
        for name in request.extras:
            extra = self._catalog.extra(name)
            if extra is None:
                return self._reject(ErrorCode.UNKNOWN_EXTRA, name, request)
            price = extra.prices.price_for(request.entrant_type)
            if price is None:
                return self._reject(
                    ErrorCode.PRICE_NOT_DEFINED_FOR_ENTRANT,
                    name,
                    request,
                    entrant_type=request.entrant_type,
                )
            extra_prices.append(price)

        quote = Quote(
            request=request,
            category=category,
            base_price=base_price,
            extra_prices=tuple(extra_prices),
        )
        logger.debug(
            "Resolved ticket price",
            extra={
                "ticket_type": request.ticket_type,
                "entrant_type": request.entrant_type,
                "total_cents": quote.total.cents,
            },
        )
        return quote

    def build_receipt(self, purchases: Iterable[TicketRequest]) -> Receipt | PricingError:
        """Price every purchase in order and assemble the receipt.

        The first rejected purchase is returned as-is; nothing after it is
        priced and no partial receipt is produced.
        """
        quotes = []
        for request in purchases:
            result = self.resolve_price(request)
            if isinstance(result, PricingError):
                return result
            quotes.append(result)

        receipt = Receipt.from_quotes(quotes)
        logger.info(
            "Receipt issued",
            extra={"purchase_count": len(quotes), "total_cents": receipt.total.cents},
        )
        return receipt

    def _reject(
        self,
        code: ErrorCode,
        value: str,
        request: TicketRequest,
        entrant_type: str | None = None,
    ) -> PricingError:
        error = PricingError(code=code, value=value, entrant_type=entrant_type)
        logger.warning(
            "Ticket request rejected: %s",
            error.message,
            extra={
                "error_code": code.value,
                "ticket_type": request.ticket_type,
                "entrant_type": request.entrant_type,
            },
        )
        return error
