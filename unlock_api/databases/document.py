import logging
from mongoengine.connection import ConnectionFailure
from mongoengine.errors import OperationError
from pymongo.errors import PyMongoError
from .database import RecordStore, USER_FIELDS
from ..errors import StorageError
from ..models import UserModel, PaymentModel, utc_now

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (PyMongoError, ConnectionFailure, OperationError)


class DocumentRecordStore(RecordStore):
    """MongoDB store through mongoengine. Failures surface as StorageError, never retried."""

    mode = "document"

    async def find_user(self, email):
        try:
            return UserModel.objects(email=email).first()
        except STORAGE_ERRORS as exc:
            raise StorageError() from exc

    async def upsert_user(self, email, **fields):
        self.check_user_fields(fields)
        now = utc_now()
        updates = {f"set__{name}": value for name, value in fields.items()}
        updates["set__updated_at"] = now
        updates["set_on_insert__created_at"] = now
        for name in USER_FIELDS - set(fields):
            default = UserModel._fields[name].default
            if callable(default):
                default = default()
            if default is not None:
                updates[f"set_on_insert__{name}"] = default
        try:
            return UserModel.objects(email=email).modify(upsert=True, new=True, **updates)
        except STORAGE_ERRORS as exc:
            raise StorageError() from exc

    async def create_payment(self, order_id, payment_id, amount, status, email):
        payment = PaymentModel(
            order_id=order_id,
            payment_id=payment_id,
            amount=amount,
            status=status,
            email=email,
        )
        try:
            payment.save()
        except STORAGE_ERRORS as exc:
            raise StorageError() from exc
        return payment

    async def list_payments(self, email):
        try:
            return list(PaymentModel.objects(email=email).order_by("date"))
        except STORAGE_ERRORS as exc:
            raise StorageError() from exc
