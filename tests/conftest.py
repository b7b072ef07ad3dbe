from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from src.api.routes.routes import get_ticket_service
from src.application.ports import (
    FailureRecorder,
    SeatReservationService,
    TicketPaymentService,
)
from src.application.ticket_service import TicketService
from src.main import app


@pytest.fixture
def payment_service():
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def seat_reservation_service():
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def failure_recorder():
    return create_autospec(FailureRecorder, instance=True)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service, failure_recorder):
    return TicketService(
        payment_service=payment_service,
        seat_reservation_service=seat_reservation_service,
        failure_recorder=failure_recorder,
        max_tickets=20,
    )


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def client(ticket_service):
    app.dependency_overrides[get_ticket_service] = lambda: ticket_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
