# tests/unit/test_collaborators.py

import pytest

from src.infrastructure.collaborators.factory import (
    build_payment_service,
    build_ticket_service,
)
from src.infrastructure.collaborators.logging_services import (
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)
from src.infrastructure.collaborators.razorpay_payment_service import (
    RazorpayTicketPaymentService,
)
from src.domain.ticket_types import TicketType, TicketTypeRequest


class FakeOrders:
    def __init__(self):
        self.created = []

    def create(self, data):
        self.created.append(data)
        return {"id": "order_test_1", **data}


class FakeRazorpayClient:
    def __init__(self):
        self.order = FakeOrders()


# ---------------------
# RAZORPAY
# ---------------------

def test_razorpay_order_in_minor_units():
    client = FakeRazorpayClient()
    service = RazorpayTicketPaymentService(client, currency="GBP")

    service.make_payment(42, 80)

    assert client.order.created == [
        {
            "amount": 8000,
            "currency": "GBP",
            "notes": {"account_id": "42"},
        }
    ]


def test_razorpay_errors_propagate():
    class BrokenOrders:
        def create(self, data):
            raise ConnectionError("razorpay unreachable")

    client = FakeRazorpayClient()
    client.order = BrokenOrders()
    service = RazorpayTicketPaymentService(client, currency="GBP")

    with pytest.raises(ConnectionError):
        service.make_payment(1, 25)


# ---------------------
# FACTORY
# ---------------------

def test_default_provider_uses_logging_stand_ins():
    service = build_ticket_service("logging")

    assert isinstance(service.payment_service, LoggingTicketPaymentService)
    assert isinstance(service.seat_reservation_service, LoggingSeatReservationService)


def test_logging_stand_ins_log_calls(caplog):
    caplog.set_level("INFO")
    service = build_ticket_service("logging")

    service.purchase_tickets(9, [TicketTypeRequest(TicketType.ADULT, 2)])

    assert "Payment taken. account_id=9 amount=50" in caplog.text
    assert "Seats reserved. account_id=9 seats=2" in caplog.text


def test_razorpay_provider_requires_keys(monkeypatch):
    monkeypatch.delenv("RAZORPAY_KEY_ID", raising=False)
    monkeypatch.delenv("RAZORPAY_KEY_SECRET", raising=False)

    with pytest.raises(RuntimeError, match="Razorpay keys not configured"):
        build_payment_service("razorpay")


def test_razorpay_provider_with_keys(monkeypatch):
    monkeypatch.setenv("RAZORPAY_KEY_ID", "rzp_test_key")
    monkeypatch.setenv("RAZORPAY_KEY_SECRET", "secret")

    service = build_payment_service("razorpay")

    assert isinstance(service, RazorpayTicketPaymentService)


def test_unknown_provider():
    with pytest.raises(RuntimeError, match="Unknown payment provider"):
        build_payment_service("stripe")
