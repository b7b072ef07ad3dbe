# src/infrastructure/thirdparty/payment_gateway.py

import logging

from src.application.ports import TicketPaymentService


logger = logging.getLogger(__name__)


class TicketPaymentServiceImpl(TicketPaymentService):
    """
    Local stand-in for the external payment gateway.
    Always succeeds.
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info(
            "Payment of %s taken for Account ID %s",
            total_amount_to_pay,
            account_id,
        )
