"""Unit tests for AdmissionService.

These test pricing rules, validation order and receipt assembly.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from admissions.domain import Catalog, ErrorCode, Money, PricingError, Quote, Receipt, TicketRequest
from admissions.services import AdmissionService


@pytest.fixture
def service(catalog: Catalog) -> AdmissionService:
    return AdmissionService(catalog)


class TestResolvePrice:
    """Tests for AdmissionService.resolve_price."""

    def test_base_price_without_extras(self, service: AdmissionService):
        """general/adult with no extras costs the base price."""
        quote = service.resolve_price(TicketRequest("general", "adult"))
        assert isinstance(quote, Quote)
        assert quote.total.cents == 3000
        assert quote.extras_price == Money.zero()

    def test_base_price_plus_extras(self, service: AdmissionService):
        """Extras are priced for the same entrant type and added to the base."""
        quote = service.resolve_price(TicketRequest("general", "child", ("education", "movie", "terrace")))
        assert quote.base_price.cents == 2000
        assert [price.cents for price in quote.extra_prices] == [1000, 1000, 500]
        assert quote.total.cents == 4500

    def test_duplicate_extras_are_charged_each_time(self, service: AdmissionService):
        quote = service.resolve_price(TicketRequest("general", "adult", ("movie", "movie")))
        assert quote.total.cents == 5000

    def test_quotes_are_hashable_values(self, service: AdmissionService):
        """Equal requests produce equal, hashable quotes and receipts."""
        request = TicketRequest("general", "adult", ("movie",))
        first, second = service.resolve_price(request), service.resolve_price(request)
        assert first == second
        assert hash(first) == hash(second)
        assert hash(service.build_receipt([request])) == hash(service.build_receipt([request]))

    @pytest.mark.parametrize("ticket_type", ["general", "membership"])
    @pytest.mark.parametrize("entrant_type", ["child", "adult", "senior"])
    def test_total_is_base_plus_sum_of_extras(self, catalog, service, ticket_type, entrant_type):
        extras = ("movie", "terrace")
        quote = service.resolve_price(TicketRequest(ticket_type, entrant_type, extras))
        base = catalog.category(ticket_type).prices.price_for(entrant_type)
        expected = sum((catalog.extra(e).prices.price_for(entrant_type) for e in extras), base)
        assert quote.total == expected
        assert quote.total.cents >= base.cents

    def test_unknown_ticket_type(self, service: AdmissionService):
        result = service.resolve_price(TicketRequest("discount", "adult"))
        assert result == PricingError(ErrorCode.UNKNOWN_TICKET_TYPE, "discount")

    @pytest.mark.parametrize("entrant_type", ["adult", "kid", ""])
    def test_extras_is_not_a_ticket_type(self, service: AdmissionService, entrant_type):
        """The reserved extras key is rejected regardless of entrant type."""
        result = service.resolve_price(TicketRequest("extras", entrant_type))
        assert result.code is ErrorCode.UNKNOWN_TICKET_TYPE
        assert result.message == "Ticket type 'extras' cannot be found."

    def test_unknown_entrant_type(self, service: AdmissionService):
        result = service.resolve_price(TicketRequest("general", "kid", ("movie",)))
        assert result.code is ErrorCode.UNKNOWN_ENTRANT_TYPE
        assert result.message == "Entrant type 'kid' cannot be found."

    def test_ticket_type_checked_before_entrant_type(self, service: AdmissionService):
        result = service.resolve_price(TicketRequest("discount", "kid", ("parking",)))
        assert result.code is ErrorCode.UNKNOWN_TICKET_TYPE

    def test_entrant_type_checked_before_extras(self, service: AdmissionService):
        result = service.resolve_price(TicketRequest("general", "kid", ("parking",)))
        assert result.code is ErrorCode.UNKNOWN_ENTRANT_TYPE

    def test_stops_at_first_unknown_extra(self, service: AdmissionService):
        """Only the first invalid extra is reported."""
        result = service.resolve_price(TicketRequest("general", "adult", ("movie", "parking", "gift")))
        assert result == PricingError(ErrorCode.UNKNOWN_EXTRA, "parking")
        assert result.message == "Extra type 'parking' cannot be found."

    def test_extra_without_price_for_entrant(self, catalog_data):
        catalog_data["general"]["priceInCents"]["infant"] = 0
        service = AdmissionService(Catalog.from_mapping(catalog_data))
        result = service.resolve_price(TicketRequest("general", "infant", ("movie",)))
        assert result.code is ErrorCode.PRICE_NOT_DEFINED_FOR_ENTRANT
        assert result.message == "Extra type 'movie' has no price for entrant type 'infant'."

    def test_rejection_is_logged(self, service: AdmissionService, caplog):
        with caplog.at_level(logging.WARNING, logger="admissions"):
            service.resolve_price(TicketRequest("general", "kid"))
        record = caplog.records[-1]
        assert record.error_code == "UNKNOWN_ENTRANT_TYPE"
        assert record.entrant_type == "kid"


class TestBuildReceipt:
    """Tests for AdmissionService.build_receipt."""

    def test_empty_batch(self, service: AdmissionService):
        receipt = service.build_receipt([])
        assert receipt.lines == ()
        assert receipt.total == Money.zero()

    def test_total_is_sum_of_individual_prices(self, service: AdmissionService):
        purchases = [
            TicketRequest("general", "adult", ("movie", "terrace")),
            TicketRequest("membership", "senior"),
            TicketRequest("membership", "child", ("education",)),
        ]
        receipt = service.build_receipt(purchases)
        assert isinstance(receipt, Receipt)
        expected = sum(service.resolve_price(p).total.cents for p in purchases)
        assert receipt.total.cents == expected == 5000 + 2300 + 2500

    def test_lines_follow_purchase_order(self, service: AdmissionService):
        receipt = service.build_receipt(
            [TicketRequest("membership", "senior"), TicketRequest("general", "child")]
        )
        assert [(line.entrant_type, line.description) for line in receipt.lines] == [
            ("senior", "Membership Admission"),
            ("child", "General Admission"),
        ]

    def test_first_error_is_returned(self, service: AdmissionService):
        result = service.build_receipt(
            [
                TicketRequest("general", "adult"),
                TicketRequest("general", "adult", ("parking",)),
                TicketRequest("discount", "adult"),
            ]
        )
        assert result == PricingError(ErrorCode.UNKNOWN_EXTRA, "parking")

    def test_stops_pricing_after_error(self, service: AdmissionService):
        """Purchases after a rejected one are never resolved."""

        def purchases():
            yield TicketRequest("discount", "adult")
            pytest.fail("purchase after the error was consumed")

        result = service.build_receipt(purchases())
        assert result.code is ErrorCode.UNKNOWN_TICKET_TYPE
