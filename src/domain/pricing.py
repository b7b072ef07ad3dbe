# src/domain/pricing.py

from types import MappingProxyType
from typing import FrozenSet, Mapping

from src.domain.ticket_request import TicketType


TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)

# Infants sit on an adult's lap.
SEAT_ELIGIBLE_TYPES: FrozenSet[TicketType] = frozenset(
    {
        TicketType.ADULT,
        TicketType.CHILD,
    }
)


def price_for(ticket_type: TicketType) -> int:
    return TICKET_PRICES[ticket_type]


def occupies_seat(ticket_type: TicketType) -> bool:
    return ticket_type in SEAT_ELIGIBLE_TYPES
