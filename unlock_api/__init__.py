import logging
from flask import Flask
from . import config
from .controllers import OtpController, PaymentController, StatusController
from .databases import StorageSelector, LOCAL_MODE
from .error_handlers import register_error_handlers
from .extensions import cors, mail
from .logging_config import configure_logging
from .routers import register_blueprints
from .utils import OtpNotifier, build_ledger

logger = logging.getLogger(__name__)


def create_app(overrides=None, store=None, ledger=None, notifier=None, rng=None):
    """Build the Flask app.

    ``store``, ``ledger``, ``notifier`` and ``rng`` replace the collaborators
    that would otherwise be built from configuration.
    """
    app = Flask(__name__)
    app.config.from_mapping(
        LOG_LEVEL=config.log_level,
        LOG_FORMAT="json",
        MONGO_URI=config.mongo_uri,
        MONGO_TIMEOUT_MS=config.mongo_timeout_ms,
        RAZORPAY_KEY_ID=config.razorpay_key_id,
        RAZORPAY_KEY_SECRET=config.razorpay_key_secret,
        RAZORPAY_BASE_URL=config.razorpay_base_url,
        LEDGER_TIMEOUT=config.ledger_timeout,
        EMAIL_USER=config.email_user,
        EMAIL_PASS=config.email_pass,
        OTP_TTL_MINUTES=config.otp_ttl_minutes,
        PAYMENT_CURRENCY=config.payment_currency,
        PAYMENT_SETTLEMENT_AMOUNT=config.payment_settlement_amount,
    )
    if overrides:
        app.config.update(overrides)
    app.config.setdefault("MAIL_SERVER", config.mail_server)
    app.config.setdefault("MAIL_PORT", config.mail_port)
    app.config.setdefault("MAIL_USE_SSL", True)
    app.config.setdefault("MAIL_USERNAME", app.config["EMAIL_USER"])
    app.config.setdefault("MAIL_PASSWORD", app.config["EMAIL_PASS"])
    app.config.setdefault("MAIL_DEFAULT_SENDER", ("Valentine App", app.config["EMAIL_USER"]))

    configure_logging(app.config["LOG_LEVEL"], app.config["LOG_FORMAT"])
    cors.init_app(app)
    mail.init_app(app)

    if store is None:
        store = StorageSelector(
            app.config["MONGO_URI"], timeout_ms=app.config["MONGO_TIMEOUT_MS"]
        ).build_store()
    if ledger is None:
        ledger = build_ledger(
            app.config["RAZORPAY_KEY_ID"],
            app.config["RAZORPAY_KEY_SECRET"],
            base_url=app.config["RAZORPAY_BASE_URL"],
            timeout=app.config["LEDGER_TIMEOUT"],
        )
    if notifier is None:
        notifier = OtpNotifier(
            bool(app.config["EMAIL_USER"] and app.config["EMAIL_PASS"]),
            ttl_minutes=app.config["OTP_TTL_MINUTES"],
        )

    payment_controller = PaymentController(
        store,
        ledger,
        currency=app.config["PAYMENT_CURRENCY"],
        settlement_amount=app.config["PAYMENT_SETTLEMENT_AMOUNT"],
    )
    app.extensions["record_store"] = store
    app.extensions["otp_controller"] = OtpController(
        store, notifier, ttl_minutes=app.config["OTP_TTL_MINUTES"], rng=rng
    )
    app.extensions["payment_controller"] = payment_controller
    app.extensions["status_controller"] = StatusController(
        store, payment_controller, notifier
    )

    register_blueprints(app)
    register_error_handlers(app)

    if store.mode == LOCAL_MODE:
        logger.warning("Storage mode: local (data will be lost on restart)")
    else:
        logger.info("Storage mode: %s", store.mode)
    return app
