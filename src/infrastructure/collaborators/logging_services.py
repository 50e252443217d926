# src/infrastructure/collaborators/logging_services.py

import logging

from src.application.ports import SeatReservationService, TicketPaymentService


logger = logging.getLogger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):
    """Local stand-in that records the charge in the log."""

    def make_payment(self, account_id: int, total_amount: int) -> None:
        logger.info(
            "Payment taken. account_id=%s amount=%s",
            account_id,
            total_amount,
        )


class LoggingSeatReservationService(SeatReservationService):
    """Local stand-in that records the reservation in the log."""

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        logger.info(
            "Seats reserved. account_id=%s seats=%s",
            account_id,
            total_seats,
        )
