from abc import ABC, abstractmethod
from ..models import UserModel

USER_FIELDS = frozenset(UserModel._fields) - {"id", "email", "created_at", "updated_at"}


class RecordStore(ABC):
    """Storage for users and payments, with the same semantics on every backend.

    ``upsert_user`` merges the given fields into the existing record instead of
    replacing it, so fields not passed in survive.
    """

    mode = None

    @staticmethod
    def check_user_fields(fields):
        if unknown := set(fields) - USER_FIELDS:
            raise ValueError(f"unknown user fields: {', '.join(sorted(unknown))}")

    @abstractmethod
    async def find_user(self, email):
        pass

    @abstractmethod
    async def upsert_user(self, email, **fields):
        pass

    @abstractmethod
    async def create_payment(self, order_id, payment_id, amount, status, email):
        pass

    @abstractmethod
    async def list_payments(self, email):
        pass
