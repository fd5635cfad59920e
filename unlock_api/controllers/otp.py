import datetime
import logging
import random
import smtplib
from ..errors import ValidationError, NotFoundError, InvalidOtpError, DeliveryError
from ..utils import Validation, OtpNotifier, generate_otp

logger = logging.getLogger(__name__)

TOKEN_PLACEHOLDER = "mock-jwt-token"


def as_utc(value):
    # MongoDB hands back naive datetimes that are already UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


class OtpController:
    def __init__(self, store, notifier, ttl_minutes=10, rng=None):
        self.store = store
        self.notifier = notifier
        self.ttl_minutes = ttl_minutes
        self.rng = rng or random.SystemRandom()

    async def send_otp(self, email, timestamp):
        errors = {}
        await Validation.validate_required_text_async(errors, "email", email)
        if errors:
            raise ValidationError("Email required")
        otp = generate_otp(6, self.rng)
        expires = timestamp + datetime.timedelta(minutes=self.ttl_minutes)
        await self.store.upsert_user(email, otp=otp, otp_expires=expires)
        try:
            outcome = self.notifier.deliver(email, otp)
        except (smtplib.SMTPException, OSError) as exc:
            raise DeliveryError() from exc
        if outcome == OtpNotifier.DELIVERED:
            return {"success": True, "message": f"OTP Sent to {email}!"}
        return {"success": True, "message": "OTP Logged to Console (Check Terminal)"}

    async def verify_otp(self, email, otp, timestamp):
        if not email or not (user := await self.store.find_user(email)):
            raise NotFoundError("User not found")
        if not self.is_valid(user, otp, timestamp):
            raise InvalidOtpError("Invalid/Expired OTP")
        await self.store.upsert_user(
            email, is_verified=True, otp=None, otp_expires=None
        )
        logger.info("OTP verified for %s", email)
        return {"success": True, "message": "Login Success!", "token": TOKEN_PLACEHOLDER}

    @staticmethod
    def is_valid(user, otp, timestamp):
        if not user.otp or not otp or user.otp_expires is None:
            return False
        return user.otp == otp and as_utc(timestamp) < as_utc(user.otp_expires)
