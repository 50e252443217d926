import logging
from typing import Optional, Sequence

from src.application.ports import SeatReservationService, TicketPaymentService
from src.domain.exceptions import InvalidPurchaseError
from src.domain.purchase_rules import PurchaseRules
from src.domain.ticket_types import TicketTypeRequest


logger = logging.getLogger(__name__)


class TicketService:
    """Application service coordinating the ticket purchase workflow."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
    ):
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service

    def purchase_tickets(
        self,
        account_id: Optional[int],
        ticket_type_requests: Optional[Sequence[Optional[TicketTypeRequest]]],
    ) -> None:
        try:
            summary = PurchaseRules.evaluate(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Rejected ticket purchase. account_id=%s reason=%s",
                account_id,
                exc.reason,
            )
            raise

        # Payment and reservation are not atomic; a failed reservation
        # after a successful payment is not compensated.
        self.payment_service.make_payment(account_id, summary.total_amount)
        self.seat_reservation_service.reserve_seat(account_id, summary.total_seats)

        logger.info(
            "Purchased tickets. account_id=%s tickets=%s amount=%s seats=%s",
            account_id,
            summary.total_tickets,
            summary.total_amount,
            summary.total_seats,
        )
