from functools import lru_cache
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.application.ticket_service import TicketService
from src.api.schemas.schemas import (
    ErrorDetail,
    PurchaseRequest,
    PurchaseResponse,
)
from src.config import get_settings
from src.domain.exceptions import (
    InvalidPurchaseError,
    PaymentGatewayError,
    SeatReservationError,
)
from src.infrastructure.metrics import PrometheusFailureRecorder
from src.infrastructure.thirdparty.payment_gateway import TicketPaymentServiceImpl
from src.infrastructure.thirdparty.seat_booking import SeatReservationServiceImpl


router = APIRouter()
logger = logging.getLogger(__name__)


@lru_cache
def get_ticket_service() -> TicketService:
    settings = get_settings()
    return TicketService(
        payment_service=TicketPaymentServiceImpl(),
        seat_reservation_service=SeatReservationServiceImpl(),
        failure_recorder=PrometheusFailureRecorder(),
        max_tickets=settings.max_tickets_allowed,
    )


def _error_detail(exc: InvalidPurchaseError) -> dict:
    return ErrorDetail(
        code=exc.error_code.value,
        description=exc.error_code.description,
        message=exc.message,
    ).model_dump()


@router.get("/health")
def health():
    return {"message": "Cinema Ticket Service is running"}


@router.get("/metrics")
def metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.post("/accounts/{account_id}/tickets", response_model=PurchaseResponse)
def purchase_tickets(
    account_id: int,
    request: PurchaseRequest,
    service: TicketService = Depends(get_ticket_service),
):
    ticket_type_requests = [item.to_domain() for item in request.ticket_type_requests]

    try:
        service.purchase_tickets(account_id, ticket_type_requests)
    except (PaymentGatewayError, SeatReservationError) as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_error_detail(exc),
        ) from exc
    except InvalidPurchaseError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_error_detail(exc),
        ) from exc

    logger.info("Tickets purchased for Account ID %s", account_id)
    return PurchaseResponse(account_id=account_id)
