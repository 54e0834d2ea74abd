"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admissions.domain import ErrorCode, PricingError
from admissions.handlers.serializers import (
    PriceRequestSerializer,
    QuoteSerializer,
    ReceiptRequestSerializer,
    ReceiptSerializer,
)
from admissions.services import AdmissionService

logger = logging.getLogger(__name__)


def _error_response(code: str, message: str, details=None) -> Response:
    body = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    return Response({"error": body}, status=status.HTTP_400_BAD_REQUEST)


def _invalid_request(serializer) -> Response:
    errors = serializer.errors
    if "catalog" in errors:
        logger.info("Rejected malformed catalog", extra={"error_code": ErrorCode.INVALID_CATALOG.value})
        return _error_response(ErrorCode.INVALID_CATALOG.value, "Invalid catalog", errors["catalog"])
    return _error_response(ErrorCode.INVALID_REQUEST.value, "Invalid request body", errors)


def _pricing_error(error: PricingError) -> Response:
    return _error_response(error.code.value, error.message)


class TicketPriceView(APIView):
    """Handler for POST /api/tickets/price"""

    def post(self, request: Request) -> Response:
        serializer = PriceRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_request(serializer)

        catalog, ticket = serializer.to_domain()
        result = AdmissionService(catalog).resolve_price(ticket)
        if isinstance(result, PricingError):
            return _pricing_error(result)
        return Response(QuoteSerializer(result).data)


class ReceiptView(APIView):
    """Handler for POST /api/tickets/receipt"""

    def post(self, request: Request) -> Response:
        serializer = ReceiptRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_request(serializer)

        catalog, purchases = serializer.to_domain()
        result = AdmissionService(catalog).build_receipt(purchases)
        if isinstance(result, PricingError):
            return _pricing_error(result)
        return Response(ReceiptSerializer(result).data)
