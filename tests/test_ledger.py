import hashlib
import hmac
from unittest.mock import Mock
import pytest
import requests
from unlock_api.config import PLACEHOLDER_RAZORPAY_KEY_ID
from unlock_api.utils import (
    RazorpayLedger,
    build_ledger,
    generate_signature,
    verify_signature,
)

pytestmark = pytest.mark.payment


def test_signature_is_hmac_sha256_of_joined_ids():
    expected = hmac.new(b"s3cret", b"order_1|pay_1", hashlib.sha256).hexdigest()

    assert generate_signature("s3cret", "order_1", "pay_1") == expected
    assert verify_signature("s3cret", "order_1", "pay_1", expected) is True


@pytest.mark.parametrize("signature", [None, "", "abc", 12345])
def test_verify_signature_rejects_garbage(signature):
    assert verify_signature("s3cret", "order_1", "pay_1", signature) is False


def test_signature_depends_on_secret():
    signature = generate_signature("other", "order_1", "pay_1")
    assert verify_signature("s3cret", "order_1", "pay_1", signature) is False


def test_create_order_posts_to_razorpay():
    session = Mock()
    session.post.return_value.json.return_value = {"id": "order_Abc123", "amount": 49900}
    ledger = RazorpayLedger(
        "rzp_test_key", "s3cret", base_url="https://api.example.test/v1/", session=session
    )

    order = ledger.create_order(49900, "INR", "receipt_1")

    assert order == {"id": "order_Abc123", "amount": 49900}
    assert session.auth == ("rzp_test_key", "s3cret")
    session.post.assert_called_once_with(
        "https://api.example.test/v1/orders",
        json={"amount": 49900, "currency": "INR", "receipt": "receipt_1"},
        timeout=15.0,
    )
    session.post.return_value.raise_for_status.assert_called_once()
    assert ledger.secret == "s3cret"


def test_create_order_raises_on_http_error():
    session = Mock()
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("401")
    ledger = RazorpayLedger("rzp_test_key", "s3cret", session=session)

    with pytest.raises(requests.HTTPError):
        ledger.create_order(49900, "INR", "receipt_1")


@pytest.mark.parametrize(
    "key_id, key_secret",
    [("", "s3cret"), ("rzp_test_key", ""), (None, None), (PLACEHOLDER_RAZORPAY_KEY_ID, "x")],
)
def test_build_ledger_without_credentials(key_id, key_secret):
    assert build_ledger(key_id, key_secret) is None


def test_build_ledger_with_credentials():
    ledger = build_ledger("rzp_test_key", "s3cret", timeout=3)

    assert isinstance(ledger, RazorpayLedger)
    assert ledger.timeout == 3
