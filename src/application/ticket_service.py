import logging
from typing import NoReturn, Sequence

from src.application.ports import (
    FailureRecorder,
    NullFailureRecorder,
    SeatReservationService,
    TicketPaymentService,
)
from src.config import DEFAULT_MAX_TICKETS_ALLOWED
from src.domain import purchase_rules
from src.domain.exceptions import (
    ErrorCode,
    InvalidPurchaseError,
    PaymentGatewayError,
    SeatReservationError,
)
from src.domain.ticket_request import TicketTypeRequest


logger = logging.getLogger(__name__)


class TicketService:
    """
    Application service coordinating a ticket purchase.

    Validates the requested tickets, takes payment for them and then
    reserves seats. A reservation failure after a successful payment
    leaves the payment in place; callers can detect this through
    SeatReservationError.payment_taken.
    """

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        failure_recorder: FailureRecorder | None = None,
        max_tickets: int = DEFAULT_MAX_TICKETS_ALLOWED,
    ):
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.failure_recorder = failure_recorder or NullFailureRecorder()
        self.max_tickets = max_tickets

    def purchase_tickets(
        self,
        account_id: int | None,
        ticket_type_requests: Sequence[TicketTypeRequest] | None,
    ) -> None:
        logger.debug("Validating requests for Account ID %s", account_id)
        self._validate_request(account_id, ticket_type_requests)

        total_amount_to_pay = purchase_rules.calculate_total_amount(
            ticket_type_requests
        )
        total_seats_to_allocate = purchase_rules.calculate_total_seats(
            ticket_type_requests
        )

        try:
            logger.debug("Proceeding for payment for Account ID %s", account_id)
            self.payment_service.make_payment(account_id, total_amount_to_pay)
        except Exception:
            logger.exception(
                "Payment gateway failed to process payment for Account ID %s",
                account_id,
            )
            self.failure_recorder.record_operational_failure()
            raise PaymentGatewayError(
                ErrorCode.UNKNOWN_ERROR,
                f"Payment failed for Account id {account_id}",
            ) from None
        logger.debug("Payment successful for Account ID %s", account_id)

        try:
            logger.debug(
                "Proceeding for seat reservation for Account ID %s", account_id
            )
            self.seat_reservation_service.reserve_seat(
                account_id, total_seats_to_allocate
            )
        except Exception:
            logger.exception(
                "Seat reservation failed after payment of %s for Account ID %s",
                total_amount_to_pay,
                account_id,
            )
            self.failure_recorder.record_operational_failure()
            raise SeatReservationError(
                ErrorCode.UNKNOWN_ERROR,
                f"Seat reservation failed for Account id {account_id}",
            ) from None
        logger.debug("Seat reservation successful for Account ID %s", account_id)

    def _validate_request(
        self,
        account_id: int | None,
        ticket_type_requests: Sequence[TicketTypeRequest] | None,
    ) -> None:
        """
        Checks, in order:
        1. account id is a positive integer
        2. purchase data is present
        3. non-infant tickets are within the maximum
        4. at least one adult ticket is requested
        5. infants do not outnumber adults
        """
        if not purchase_rules.is_valid_account_id(account_id):
            logger.error("Invalid Account ID %s", account_id)
            self._reject(ErrorCode.INVALID_ACCOUNT, "Account ID is not a valid data")

        if purchase_rules.is_purchase_data_missing(ticket_type_requests):
            logger.error("Missing purchase data for Account ID %s", account_id)
            self._reject(
                ErrorCode.PURCHASE_DATA_MISSING,
                f"Purchase data is missing for Account ID {account_id}",
            )

        if purchase_rules.is_max_ticket_count_exceeded(
            ticket_type_requests, self.max_tickets
        ):
            logger.error(
                "Request for maximum number of tickets exceeded: %s",
                ticket_type_requests,
            )
            self._reject(
                ErrorCode.MAX_TICKETS_EXCEEDED,
                f"Max ticket purchase count exceed the limit of {self.max_tickets}",
            )

        if not purchase_rules.is_adult_ticket_present(ticket_type_requests):
            logger.error("Request having no adults: %s", ticket_type_requests)
            self._reject(
                ErrorCode.NO_ADULT_PRESENT,
                f"No adult ticket is present for Account ID {account_id}",
            )

        # Reuses NO_ADULT_PRESENT.
        if not purchase_rules.is_infant_count_within_adult_count(ticket_type_requests):
            logger.error(
                "Request having more infants than adults: %s", ticket_type_requests
            )
            self._reject(
                ErrorCode.NO_ADULT_PRESENT,
                f"Adult tickets less than infant tickets for Account ID {account_id}",
            )

    def _reject(self, error_code: ErrorCode, message: str) -> NoReturn:
        self.failure_recorder.record_business_failure()
        raise InvalidPurchaseError(error_code, message)
