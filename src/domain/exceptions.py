from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    NO_ADULT_PRESENT = "NO_ADULT_PRESENT"
    PURCHASE_DATA_MISSING = "PURCHASE_DATA_MISSING"

    @property
    def description(self) -> str:
        return _ERROR_DESCRIPTIONS[self]


_ERROR_DESCRIPTIONS = {
    ErrorCode.UNKNOWN_ERROR: "Unknown application error",
    ErrorCode.INVALID_ACCOUNT: "Account Id Invalid",
    ErrorCode.MAX_TICKETS_EXCEEDED: "Max ticket count purchase exceeded",
    ErrorCode.NO_ADULT_PRESENT: "Adult ticket is not present",
    ErrorCode.PURCHASE_DATA_MISSING: "Purchase data is null",
}


class CinemaTicketError(Exception):
    """
    Base exception for all domain-level errors
    inside the cinema ticket service.
    """


class InvalidPurchaseError(CinemaTicketError):
    """
    Raised when a ticket purchase cannot be completed.
    Carries the error code and a caller-safe message.
    """

    def __init__(self, error_code: ErrorCode, message: str):
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class PaymentGatewayError(InvalidPurchaseError):
    """Raised when the payment collaborator fails to take payment."""


class SeatReservationError(InvalidPurchaseError):
    """
    Raised when the seat reservation collaborator fails.

    Payment has already been taken by the time this is raised
    and is not reversed.
    """

    payment_taken = True
