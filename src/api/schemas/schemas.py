from pydantic import BaseModel

from src.domain.ticket_types import TicketType, TicketTypeRequest


class TicketTypeRequestPayload(BaseModel):
    ticket_type: TicketType
    # Range is checked by the purchase rules, not the schema.
    no_of_tickets: int

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(
            ticket_type=self.ticket_type,
            no_of_tickets=self.no_of_tickets,
        )


class PurchaseRequest(BaseModel):
    account_id: int | None = None
    ticket_type_requests: list[TicketTypeRequestPayload | None] | None = None

    def to_domain(self) -> list[TicketTypeRequest | None] | None:
        if self.ticket_type_requests is None:
            return None
        return [
            item.to_domain() if item is not None else None
            for item in self.ticket_type_requests
        ]


class PurchaseResponse(BaseModel):
    account_id: int
    status: str
