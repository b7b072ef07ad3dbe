# src/domain/purchase_rules.py

"""
Business rules for a single ticket purchase.

All functions are pure and operate on the requests exactly as given:
requests of the same type are summed, never merged or deduplicated.
"""

from typing import Sequence

from src.domain.pricing import occupies_seat, price_for
from src.domain.ticket_request import TicketType, TicketTypeRequest


def is_valid_account_id(account_id) -> bool:
    """
    Returns True for a strictly positive integer account id.
    """
    if account_id is None or isinstance(account_id, bool):
        return False
    if not isinstance(account_id, int):
        return False
    return account_id > 0


def is_purchase_data_missing(
    ticket_type_requests: Sequence[TicketTypeRequest] | None,
) -> bool:
    if ticket_type_requests is None:
        return True
    return any(request is None for request in ticket_type_requests)


def _sum_quantities(
    ticket_type_requests: Sequence[TicketTypeRequest],
    ticket_type: TicketType,
) -> int:
    return sum(
        request.quantity
        for request in ticket_type_requests
        if request.ticket_type == ticket_type
    )


def is_max_ticket_count_exceeded(
    ticket_type_requests: Sequence[TicketTypeRequest],
    max_tickets: int,
) -> bool:
    """
    Returns True if non-infant tickets exceed max_tickets.
    Infant tickets never count towards the limit.
    """
    total_tickets = sum(
        request.quantity
        for request in ticket_type_requests
        if request.ticket_type != TicketType.INFANT
    )
    return total_tickets > max_tickets


def is_adult_ticket_present(
    ticket_type_requests: Sequence[TicketTypeRequest],
) -> bool:
    """
    Returns True if any request is for the ADULT type.

    Only the presence of the type is checked, so an ADULT request
    with quantity 0 satisfies this rule.
    """
    return any(
        request.ticket_type == TicketType.ADULT
        for request in ticket_type_requests
    )


def is_infant_count_within_adult_count(
    ticket_type_requests: Sequence[TicketTypeRequest],
) -> bool:
    """
    Returns True if there is at least one adult ticket per infant ticket,
    compared as totals across all requests.
    """
    adults = _sum_quantities(ticket_type_requests, TicketType.ADULT)
    infants = _sum_quantities(ticket_type_requests, TicketType.INFANT)
    return infants <= adults


def calculate_total_amount(
    ticket_type_requests: Sequence[TicketTypeRequest],
) -> int:
    return sum(
        price_for(request.ticket_type) * request.quantity
        for request in ticket_type_requests
    )


def calculate_total_seats(
    ticket_type_requests: Sequence[TicketTypeRequest],
) -> int:
    return sum(
        request.quantity
        for request in ticket_type_requests
        if occupies_seat(request.ticket_type)
    )
