"""Collaborator interfaces consumed by the ticket service.

Implementations are expected to succeed; any exception they raise
propagates to the caller unchanged.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Charges an account for a purchase."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge total_amount (whole currency units) to the account."""
        ...


class SeatReservationService(ABC):
    """Reserves seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve total_seats seats for the account."""
        ...
