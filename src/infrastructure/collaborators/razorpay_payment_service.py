# src/infrastructure/collaborators/razorpay_payment_service.py

import logging

import razorpay

from src.application.ports import TicketPaymentService


logger = logging.getLogger(__name__)


class RazorpayTicketPaymentService(TicketPaymentService):
    """
    Charges purchases by creating a Razorpay order.
    Razorpay amounts are in minor units, so whole units are scaled by 100.
    """

    def __init__(self, client: razorpay.Client, currency: str):
        self.client = client
        self.currency = currency

    def make_payment(self, account_id: int, total_amount: int) -> None:
        order = self.client.order.create(
            {
                "amount": total_amount * 100,
                "currency": self.currency,
                "notes": {"account_id": str(account_id)},
            }
        )
        logger.info(
            "Razorpay order created. account_id=%s order_id=%s amount=%s currency=%s",
            account_id,
            order.get("id"),
            total_amount,
            self.currency,
        )
