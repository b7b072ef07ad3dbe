import logging

from src.application.ticket_service import TicketService
from src.config import get_settings
from src.domain.exceptions import InvalidPurchaseError
from src.domain.ticket_request import TicketType, TicketTypeRequest
from src.infrastructure.thirdparty.payment_gateway import TicketPaymentServiceImpl
from src.infrastructure.thirdparty.seat_booking import SeatReservationServiceImpl


def demo_orders() -> list[tuple[int, list[TicketTypeRequest]]]:
    return [
        (
            1,
            [
                TicketTypeRequest(TicketType.ADULT, 2),
                TicketTypeRequest(TicketType.CHILD, 1),
                TicketTypeRequest(TicketType.INFANT, 1),
            ],
        ),
        (
            2,
            [TicketTypeRequest(TicketType.CHILD, 3)],
        ),
        (
            3,
            [
                TicketTypeRequest(TicketType.ADULT, 1),
                TicketTypeRequest(TicketType.INFANT, 2),
            ],
        ),
    ]


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    service = TicketService(
        payment_service=TicketPaymentServiceImpl(),
        seat_reservation_service=SeatReservationServiceImpl(),
        max_tickets=settings.max_tickets_allowed,
    )

    for account_id, ticket_type_requests in demo_orders():
        try:
            service.purchase_tickets(account_id, ticket_type_requests)
            print(f"Account {account_id}: purchased")
        except InvalidPurchaseError as exc:
            print(f"Account {account_id}: {exc.error_code.value} - {exc.message}")


if __name__ == "__main__":
    main()
