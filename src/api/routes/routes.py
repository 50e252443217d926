import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.schemas.schemas import PurchaseRequest, PurchaseResponse
from src.application.ticket_service import TicketService
from src.domain.exceptions import InvalidPurchaseError
from src.infrastructure.collaborators.factory import build_ticket_service


router = APIRouter()
logger = logging.getLogger(__name__)


def get_ticket_service() -> TicketService:
    return build_ticket_service()


@router.get("/health")
def health():
    return {"message": "Ticket Purchase Engine is running"}


@router.post("/tickets/purchase", response_model=PurchaseResponse)
def purchase_tickets(
    request: PurchaseRequest,
    ticket_service: TicketService = Depends(get_ticket_service),
):
    try:
        ticket_service.purchase_tickets(request.account_id, request.to_domain())
    except InvalidPurchaseError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.reason,
        )

    return PurchaseResponse(account_id=request.account_id, status="PURCHASED")
