# src/domain/ticket_types.py

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketPricing:
    """Price in whole currency units and seats taken per ticket."""

    price: int
    seats_per_ticket: int


# Every TicketType must have a row here.
TICKET_PRICING: Dict[TicketType, TicketPricing] = {
    TicketType.ADULT: TicketPricing(price=25, seats_per_ticket=1),
    TicketType.CHILD: TicketPricing(price=15, seats_per_ticket=1),
    # Infants sit on an adult's lap.
    TicketType.INFANT: TicketPricing(price=0, seats_per_ticket=0),
}


@dataclass(frozen=True)
class TicketTypeRequest:
    """
    One line item of a purchase: a passenger category and a ticket count.
    Both fields are checked by PurchaseRules, not here. A plain category
    name such as "ADULT" is accepted in place of the enum member.
    """

    ticket_type: TicketType
    no_of_tickets: int
