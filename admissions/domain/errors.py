"""Domain error codes for the admissions module.

Two kinds of failure live here:

- ``PricingError`` is a *result*, not an exception. It is returned by the
  price resolver for caller-input problems (unknown ticket type, entrant
  type or extra) and rendered to text once, at the boundary.
- ``DomainError`` subclasses are raised for structurally malformed input
  (a catalog or ticket request that does not have the expected shape).
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_TICKET_TYPE = "UNKNOWN_TICKET_TYPE"
    UNKNOWN_ENTRANT_TYPE = "UNKNOWN_ENTRANT_TYPE"
    UNKNOWN_EXTRA = "UNKNOWN_EXTRA"
    PRICE_NOT_DEFINED_FOR_ENTRANT = "PRICE_NOT_DEFINED_FOR_ENTRANT"
    INVALID_CATALOG = "INVALID_CATALOG"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    INVALID_REQUEST = "INVALID_REQUEST"


_PRICING_MESSAGES = {
    ErrorCode.UNKNOWN_TICKET_TYPE: "Ticket type '{value}' cannot be found.",
    ErrorCode.UNKNOWN_ENTRANT_TYPE: "Entrant type '{value}' cannot be found.",
    ErrorCode.UNKNOWN_EXTRA: "Extra type '{value}' cannot be found.",
    ErrorCode.PRICE_NOT_DEFINED_FOR_ENTRANT: (
        "Extra type '{value}' has no price for entrant type '{entrant_type}'."
    ),
}


@dataclass(frozen=True)
class PricingError:
    """Rejected ticket request: the error kind plus the offending value."""

    code: ErrorCode
    value: str
    entrant_type: str | None = None

    def __post_init__(self) -> None:
        if self.code not in _PRICING_MESSAGES:
            raise ValueError(f"{self.code.value} is not a pricing error code")

    @property
    def message(self) -> str:
        return _PRICING_MESSAGES[self.code].format(
            value=self.value, entrant_type=self.entrant_type
        )

    def __str__(self) -> str:
        return self.message


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidCatalogError(DomainError):
    """Raised when a catalog mapping does not have the expected shape."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATALOG,
            message=f"Invalid catalog entry '{path}': {reason}",
        )
        self.path = path


class InvalidTicketRequestError(DomainError):
    """Raised when a ticket request mapping does not have the expected shape."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message=f"Invalid ticket request: {reason}",
        )
