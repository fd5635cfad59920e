import datetime
from unittest.mock import Mock
import mongoengine
import mongomock
import pytest
from faker import Faker
from unlock_api import create_app
from unlock_api.databases import LocalRecordStore, DocumentRecordStore
from unlock_api.utils import OtpNotifier

fake = Faker()

TEST_DB = "unlock-api-test"
TEST_SECRET = "test_razorpay_secret"

# Overrides that keep tests away from any .env credentials
LOCAL_OVERRIDES = {
    "TESTING": True,
    "MONGO_URI": "",
    "RAZORPAY_KEY_ID": "",
    "RAZORPAY_KEY_SECRET": "",
    "EMAIL_USER": "",
    "EMAIL_PASS": "",
    "MAIL_SUPPRESS_SEND": True,
    "LOG_FORMAT": "console",
}


class FixedRandom:
    """Stands in for random.SystemRandom with a scripted sequence of values."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


@pytest.fixture
def email():
    return fake.email()


@pytest.fixture
def timestamp():
    return datetime.datetime(2026, 2, 14, 12, 0, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def local_store():
    return LocalRecordStore()


@pytest.fixture
def document_store():
    mongoengine.connect(
        TEST_DB, host="mongodb://localhost", mongo_client_class=mongomock.MongoClient
    )
    yield DocumentRecordStore()
    mongoengine.get_connection().drop_database(TEST_DB)
    mongoengine.disconnect()


@pytest.fixture(params=["local", "document"])
def store(request):
    """Runs a test once per backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def notifier():
    notifier = Mock(spec=OtpNotifier)
    notifier.enabled = False
    notifier.deliver.return_value = OtpNotifier.LOGGED
    return notifier


@pytest.fixture
def ledger():
    ledger = Mock()
    ledger.secret = TEST_SECRET
    ledger.create_order.return_value = {
        "id": "order_Abc123",
        "entity": "order",
        "amount": 49900,
        "currency": "INR",
        "receipt": "receipt_1",
        "status": "created",
    }
    return ledger


@pytest.fixture
def app(local_store):
    return create_app(LOCAL_OVERRIDES, store=local_store)


@pytest.fixture
def client(app):
    return app.test_client()
