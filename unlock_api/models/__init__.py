from .base import BaseDocument, utc_now
from .user import UserModel, PAYMENT_PENDING, PAYMENT_SUCCESS
from .payment import PaymentModel
