import mongoengine as me
from .base import BaseDocument, utc_now
from .user import PAYMENT_SUCCESS


class PaymentModel(BaseDocument):
    order_id = me.StringField(required=True)
    payment_id = me.StringField(required=True)
    amount = me.IntField(required=True, min_value=0)
    status = me.StringField(choices=(PAYMENT_SUCCESS,), default=PAYMENT_SUCCESS)
    email = me.StringField(required=True)
    date = me.DateTimeField(default=utc_now)

    meta = {"collection": "payments", "indexes": ["email"]}
