import pytest
from fastapi.testclient import TestClient

from src.api.routes.routes import get_ticket_service
from src.application.ports import SeatReservationService, TicketPaymentService
from src.application.ticket_service import TicketService
from src.main import app


class RecordingPaymentService(TicketPaymentService):
    def __init__(self, calls: list):
        self.calls = calls

    def make_payment(self, account_id: int, total_amount: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list):
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats))


@pytest.fixture
def calls():
    # Shared by both stand-ins so call order can be asserted.
    return []


@pytest.fixture
def payment_service(calls):
    return RecordingPaymentService(calls)


@pytest.fixture
def seat_reservation_service(calls):
    return RecordingSeatReservationService(calls)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service):
    return TicketService(
        payment_service=payment_service,
        seat_reservation_service=seat_reservation_service,
    )


@pytest.fixture
def client(ticket_service):
    app.dependency_overrides[get_ticket_service] = lambda: ticket_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
