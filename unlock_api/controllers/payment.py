import logging
import requests
from ..errors import ValidationError, GatewayError, SignatureMismatchError
from ..models import PAYMENT_SUCCESS
from ..utils import Validation, verify_signature

logger = logging.getLogger(__name__)


class PaymentController:
    """Order creation and payment verification.

    Without a ledger every order is synthesized and every verification is
    accepted. That mock mode is for development only: it unlocks the feature
    without any payment.
    """

    def __init__(self, store, ledger=None, currency="INR", settlement_amount=499):
        self.store = store
        self.ledger = ledger
        self.currency = currency
        self.settlement_amount = settlement_amount

    @property
    def is_mock(self):
        return self.ledger is None

    async def create_order(self, amount, timestamp):
        errors = {}
        await Validation.validate_amount_async(errors, "amount", amount)
        if errors:
            raise ValidationError("Amount required")
        stamp = int(timestamp.timestamp() * 1000)
        amount_minor = amount * 100
        if self.is_mock:
            return {
                "success": True,
                "order": {
                    "id": f"order_mock_{stamp}",
                    "amount": amount_minor,
                    "currency": self.currency,
                },
                "isMock": True,
            }
        try:
            order = self.ledger.create_order(amount_minor, self.currency, f"receipt_{stamp}")
        except requests.RequestException as exc:
            raise GatewayError("Razorpay Error") from exc
        return {"success": True, "order": order}

    async def verify_payment(self, order_id, payment_id, signature, email):
        errors = {}
        await Validation.validate_required_text_async(errors, "razorpay_order_id", order_id)
        await Validation.validate_required_text_async(errors, "razorpay_payment_id", payment_id)
        await Validation.validate_required_text_async(errors, "email", email)
        if errors:
            raise ValidationError(f"Missing fields: {', '.join(errors)}")

        if self.is_mock:
            logger.warning("Mock payment mode: accepting %s without a signature check", order_id)
        elif not verify_signature(self.ledger.secret, order_id, payment_id, signature):
            logger.warning("Signature mismatch for order %s (%s)", order_id, email)
            raise SignatureMismatchError("Invalid Signature")

        # settles at the fixed price, not the amount the order was created with
        await self.store.create_payment(
            order_id, payment_id, self.settlement_amount, PAYMENT_SUCCESS, email
        )
        await self.store.upsert_user(email, payment_status=PAYMENT_SUCCESS)
        logger.info("Payment %s verified for %s", payment_id, email)
        return {"success": True, "message": "Payment Verified"}
