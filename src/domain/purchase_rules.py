# src/domain/purchase_rules.py

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from src.domain.exceptions import InvalidPurchaseError
from src.domain.ticket_types import TICKET_PRICING, TicketType, TicketTypeRequest


MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class PurchaseSummary:
    """
    Aggregated ticket counts for one validated purchase.
    Totals are derived from the pricing table.
    """

    ticket_counts: Mapping[TicketType, int]

    def count(self, ticket_type: TicketType) -> int:
        return self.ticket_counts.get(ticket_type, 0)

    @property
    def total_tickets(self) -> int:
        return sum(self.ticket_counts.values())

    @property
    def total_amount(self) -> int:
        return sum(
            count * TICKET_PRICING[ticket_type].price
            for ticket_type, count in self.ticket_counts.items()
        )

    @property
    def total_seats(self) -> int:
        return sum(
            count * TICKET_PRICING[ticket_type].seats_per_ticket
            for ticket_type, count in self.ticket_counts.items()
        )


class PurchaseRules:
    """
    Business rules for a ticket purchase.
    Validates the whole request before anything is charged or reserved.
    """

    @classmethod
    def evaluate(
        cls,
        account_id: Optional[int],
        ticket_type_requests: Optional[Sequence[Optional[TicketTypeRequest]]],
    ) -> PurchaseSummary:
        """
        Returns the aggregated summary, or raises InvalidPurchaseError
        on the first rule that fails.
        """
        cls._ensure_valid_account(account_id)

        if not ticket_type_requests:
            raise InvalidPurchaseError("No tickets requested")

        summary = cls._aggregate(ticket_type_requests)
        cls._ensure_purchase_limits(summary)
        return summary

    @staticmethod
    def _ensure_valid_account(account_id: Optional[int]) -> None:
        if account_id is None or account_id <= 0:
            raise InvalidPurchaseError("Invalid account ID")

    @staticmethod
    def _aggregate(
        ticket_type_requests: Sequence[Optional[TicketTypeRequest]],
    ) -> PurchaseSummary:
        ticket_counts = {ticket_type: 0 for ticket_type in TicketType}

        for request in ticket_type_requests:
            try:
                ticket_type = TicketType(getattr(request, "ticket_type", None))
            except ValueError:
                raise InvalidPurchaseError("Invalid ticket request")

            no_of_tickets = request.no_of_tickets
            if (
                not isinstance(no_of_tickets, int)
                or isinstance(no_of_tickets, bool)
                or no_of_tickets <= 0
            ):
                raise InvalidPurchaseError("Invalid number of tickets")

            ticket_counts[ticket_type] += no_of_tickets

        return PurchaseSummary(ticket_counts=MappingProxyType(ticket_counts))

    @staticmethod
    def _ensure_purchase_limits(summary: PurchaseSummary) -> None:
        if summary.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseError(
                f"Maximum tickets exceeded: at most "
                f"{MAX_TICKETS_PER_PURCHASE} tickets per purchase"
            )

        adults = summary.count(TicketType.ADULT)
        if adults == 0:
            raise InvalidPurchaseError(
                "Adult ticket required: at least one adult ticket per purchase"
            )

        if summary.count(TicketType.INFANT) > adults:
            raise InvalidPurchaseError(
                "Infants exceed adults: each infant needs an accompanying adult"
            )
