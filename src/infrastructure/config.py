# src/infrastructure/config.py

import os

from dotenv import load_dotenv

load_dotenv()


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# "logging" uses in-process stand-ins, "razorpay" charges through Razorpay.
PAYMENT_PROVIDER = os.getenv("PAYMENT_PROVIDER", "logging").lower()
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "GBP")


def razorpay_credentials() -> tuple[str, str]:
    key_id = os.getenv("RAZORPAY_KEY_ID")
    key_secret = os.getenv("RAZORPAY_KEY_SECRET")
    if not key_id or not key_secret:
        raise RuntimeError(
            "Razorpay keys not configured. Set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET."
        )
    return key_id, key_secret
