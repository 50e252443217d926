# src/infrastructure/collaborators/factory.py

import razorpay

from src.application.ports import TicketPaymentService
from src.application.ticket_service import TicketService
from src.infrastructure import config
from src.infrastructure.collaborators.logging_services import (
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)
from src.infrastructure.collaborators.razorpay_payment_service import (
    RazorpayTicketPaymentService,
)


def build_payment_service(provider: str | None = None) -> TicketPaymentService:
    provider = provider or config.PAYMENT_PROVIDER

    if provider == "logging":
        return LoggingTicketPaymentService()
    if provider == "razorpay":
        client = razorpay.Client(auth=config.razorpay_credentials())
        return RazorpayTicketPaymentService(client, currency=config.PAYMENT_CURRENCY)

    raise RuntimeError(f"Unknown payment provider: {provider}")


def build_ticket_service(provider: str | None = None) -> TicketService:
    return TicketService(
        payment_service=build_payment_service(provider),
        seat_reservation_service=LoggingSeatReservationService(),
    )
