import threading
from .database import RecordStore
from ..models import UserModel, PaymentModel, utc_now


class LocalRecordStore(RecordStore):
    """In-process store. Data is lost on restart."""

    mode = "local"

    def __init__(self):
        self._users = {}
        self._payments = []
        self._locks = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, email):
        with self._locks_guard:
            return self._locks.setdefault(email, threading.Lock())

    async def find_user(self, email):
        return self._users.get(email)

    async def upsert_user(self, email, **fields):
        self.check_user_fields(fields)
        with self._lock_for(email):
            if not (user := self._users.get(email)):
                user = UserModel(email=email)
                self._users[email] = user
            for name, value in fields.items():
                setattr(user, name, value)
            user.updated_at = utc_now()
            return user

    async def create_payment(self, order_id, payment_id, amount, status, email):
        payment = PaymentModel(
            order_id=order_id,
            payment_id=payment_id,
            amount=amount,
            status=status,
            email=email,
        )
        with self._locks_guard:
            self._payments.append(payment)
        return payment

    async def list_payments(self, email):
        with self._locks_guard:
            return [payment for payment in self._payments if payment.email == email]
