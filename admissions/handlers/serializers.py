"""Serializers for parsing pricing requests and rendering domain results."""

from rest_framework import serializers

from admissions.domain import Catalog, InvalidCatalogError, Quote, Receipt, ReceiptLine, TicketRequest


class CatalogField(serializers.Field):
    """Accepts the plain catalog mapping and yields a domain ``Catalog``."""

    default_error_messages = {"invalid": "Expected a catalog object."}

    def to_internal_value(self, data) -> Catalog:
        if not isinstance(data, dict):
            self.fail("invalid")
        try:
            return Catalog.from_mapping(data)
        except InvalidCatalogError as exc:
            raise serializers.ValidationError(exc.message, code=exc.code.value)


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and other non-string JSON values."""

    default_error_messages = {"not_a_string": "Expected a string."}

    def to_internal_value(self, data) -> str:
        if not isinstance(data, str):
            self.fail("not_a_string")
        return super().to_internal_value(data)


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for a single ticket request."""

    ticketType = StrictCharField(source="ticket_type", allow_blank=True, trim_whitespace=False)
    entrantType = StrictCharField(source="entrant_type", allow_blank=True, trim_whitespace=False)
    extras = serializers.ListField(
        child=StrictCharField(allow_blank=True, trim_whitespace=False),
        required=False,
        default=list,
    )

    def create(self, validated_data) -> TicketRequest:
        return TicketRequest(
            ticket_type=validated_data["ticket_type"],
            entrant_type=validated_data["entrant_type"],
            extras=tuple(validated_data["extras"]),
        )


class PriceRequestSerializer(serializers.Serializer):
    """Request body for POST /api/tickets/price."""

    catalog = CatalogField()
    ticket = TicketRequestSerializer()

    def to_domain(self) -> tuple[Catalog, TicketRequest]:
        data = self.validated_data
        return data["catalog"], TicketRequestSerializer().create(data["ticket"])


class ReceiptRequestSerializer(serializers.Serializer):
    """Request body for POST /api/tickets/receipt."""

    catalog = CatalogField()
    purchases = TicketRequestSerializer(many=True, allow_empty=True)

    def to_domain(self) -> tuple[Catalog, list[TicketRequest]]:
        data = self.validated_data
        requests = [TicketRequestSerializer().create(item) for item in data["purchases"]]
        return data["catalog"], requests


class QuoteSerializer(serializers.Serializer):
    """Serializer for Quote domain model."""

    def to_representation(self, instance: Quote) -> dict:
        return {
            "ticketType": instance.request.ticket_type,
            "entrantType": instance.request.entrant_type,
            "extras": list(instance.request.extras),
            "basePriceInCents": instance.base_price.cents,
            "extrasPriceInCents": instance.extras_price.cents,
            "priceInCents": instance.total.cents,
        }


class ReceiptLineSerializer(serializers.Serializer):
    """Serializer for ReceiptLine domain model."""

    def to_representation(self, instance: ReceiptLine) -> dict:
        return {
            "entrantType": instance.entrant_type,
            "description": instance.description,
            "extras": list(instance.extras),
            "priceInCents": instance.price.cents,
        }


class ReceiptSerializer(serializers.Serializer):
    """Serializer for Receipt domain model."""

    def to_representation(self, instance: Receipt) -> dict:
        return {
            "receipt": instance.render(),
            "totalInCents": instance.total.cents,
            "lines": ReceiptLineSerializer(instance.lines, many=True).data,
        }
