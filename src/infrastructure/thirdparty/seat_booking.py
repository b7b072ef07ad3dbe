# src/infrastructure/thirdparty/seat_booking.py

import logging

from src.application.ports import SeatReservationService


logger = logging.getLogger(__name__)


class SeatReservationServiceImpl(SeatReservationService):
    """
    Local stand-in for the external seat booking service.
    Always succeeds.
    """

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(
            "Reserved %s seats for Account ID %s",
            total_seats_to_allocate,
            account_id,
        )
