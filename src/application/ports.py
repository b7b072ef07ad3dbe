"""Collaborator interfaces used by the ticket service.

Implementations live in src/infrastructure and must be swappable.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """External payment gateway."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Take payment for an account. Raises on failure."""
        ...


class SeatReservationService(ABC):
    """External seat booking service."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for an account. Raises on failure."""
        ...


class FailureRecorder(ABC):
    """Counts failed purchases for monitoring."""

    @abstractmethod
    def record_business_failure(self) -> None:
        """A purchase was rejected by a business rule."""
        ...

    @abstractmethod
    def record_operational_failure(self) -> None:
        """A collaborator failed while processing a purchase."""
        ...


class NullFailureRecorder(FailureRecorder):

    def record_business_failure(self) -> None:
        pass

    def record_operational_failure(self) -> None:
        pass
