from .otp import otp_router
from .payment import payment_router
from .status import status_router


def register_blueprints(app):
    app.register_blueprint(otp_router, url_prefix="/api")
    app.register_blueprint(payment_router, url_prefix="/api")
    app.register_blueprint(status_router, url_prefix="/api")
