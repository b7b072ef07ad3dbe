# src/domain/ticket_request.py

from dataclasses import dataclass
from enum import Enum


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """
    Immutable request for a number of tickets of one type.
    Zero quantities are allowed; negative ones are not.
    """

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError(
                f"Expected TicketType, got {type(self.ticket_type)}"
            )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError(
                f"Expected int quantity, got {type(self.quantity)}"
            )
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")
