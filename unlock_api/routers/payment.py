import datetime
from flask import Blueprint, request, jsonify, current_app

payment_router = Blueprint("payment_router", __name__)


@payment_router.post("/create-order")
async def create_order():
    data = request.get_json(silent=True) or {}
    timestamp = datetime.datetime.now(datetime.timezone.utc)
    payment_controller = current_app.extensions["payment_controller"]
    return jsonify(await payment_controller.create_order(data.get("amount"), timestamp))


@payment_router.post("/verify-payment")
async def verify_payment():
    data = request.get_json(silent=True) or {}
    payment_controller = current_app.extensions["payment_controller"]
    return jsonify(
        await payment_controller.verify_payment(
            data.get("razorpay_order_id"),
            data.get("razorpay_payment_id"),
            data.get("razorpay_signature"),
            data.get("email"),
        )
    )
