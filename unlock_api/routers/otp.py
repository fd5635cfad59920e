import datetime
from flask import Blueprint, request, jsonify, current_app

otp_router = Blueprint("otp_router", __name__)


@otp_router.post("/send-otp")
async def send_otp():
    data = request.get_json(silent=True) or {}
    timestamp = datetime.datetime.now(datetime.timezone.utc)
    otp_controller = current_app.extensions["otp_controller"]
    return jsonify(await otp_controller.send_otp(data.get("email"), timestamp))


@otp_router.post("/verify-otp")
async def verify_otp():
    data = request.get_json(silent=True) or {}
    timestamp = datetime.datetime.now(datetime.timezone.utc)
    otp_controller = current_app.extensions["otp_controller"]
    return jsonify(
        await otp_controller.verify_otp(data.get("email"), data.get("otp"), timestamp)
    )
