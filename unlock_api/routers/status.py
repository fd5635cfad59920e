from flask import Blueprint, jsonify, current_app

status_router = Blueprint("status_router", __name__)


@status_router.get("/status")
async def get_status():
    return jsonify(await current_app.extensions["status_controller"].get_status())
