import hashlib
import hmac
import logging
import requests
from ..config import PLACEHOLDER_RAZORPAY_KEY_ID

logger = logging.getLogger(__name__)


def generate_signature(secret, order_id, payment_id):
    return hmac.new(
        secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256
    ).hexdigest()


def verify_signature(secret, order_id, payment_id, signature):
    if not signature:
        return False
    expected = generate_signature(secret, order_id, payment_id)
    return hmac.compare_digest(expected.encode(), str(signature).encode())


class RazorpayLedger:
    def __init__(
        self,
        key_id,
        key_secret,
        base_url="https://api.razorpay.com/v1",
        timeout=15.0,
        session=None,
    ):
        self.key_id = key_id
        self._secret = key_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (key_id, key_secret)

    @property
    def secret(self):
        return self._secret

    def create_order(self, amount, currency, receipt):
        response = self.session.post(
            f"{self.base_url}/orders",
            json={"amount": amount, "currency": currency, "receipt": receipt},
            timeout=self.timeout,
        )
        response.raise_for_status()
        order = response.json()
        logger.info("Razorpay order %s created for %s %s", order.get("id"), amount, currency)
        return order


def build_ledger(key_id, key_secret, base_url="https://api.razorpay.com/v1", timeout=15.0):
    if not key_id or not key_secret or key_id == PLACEHOLDER_RAZORPAY_KEY_ID:
        logger.warning("Razorpay keys missing, payment verification will be mocked")
        return None
    return RazorpayLedger(key_id, key_secret, base_url=base_url, timeout=timeout)
