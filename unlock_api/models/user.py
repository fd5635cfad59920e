import mongoengine as me
from .base import BaseDocument

PAYMENT_PENDING = "pending"
PAYMENT_SUCCESS = "success"


class UserModel(BaseDocument):
    email = me.StringField(required=True, unique=True)
    otp = me.StringField(required=False, null=True)
    otp_expires = me.DateTimeField(required=False, null=True)
    is_verified = me.BooleanField(required=False, default=False)
    payment_status = me.StringField(
        choices=(PAYMENT_PENDING, PAYMENT_SUCCESS), default=PAYMENT_PENDING
    )

    meta = {"collection": "users"}
