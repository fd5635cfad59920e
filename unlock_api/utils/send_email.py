import logging
from flask_mail import Message
from ..extensions import mail

logger = logging.getLogger(__name__)
otp_logger = logging.getLogger("unlock_api.otp")

OTP_EMAIL_SUBJECT = "Your Valentine Login Code"


def render_otp_email(otp, ttl_minutes):
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Login Code</title>
</head>
<body>
    <div style="font-family: Arial, sans-serif; color: #333; padding: 20px;">
        <h2 style="color: #ff4d6d;">Here is your login code!</h2>
        <p style="font-size: 16px;">Use this code to unlock your surprise:</p>
        <h1 style="background: #ffe6eb; color: #d63384; padding: 10px; display: inline-block; letter-spacing: 5px; border-radius: 5px;">{otp}</h1>
        <p>This code expires in {ttl_minutes} minutes.</p>
        <p style="color: #888; font-size: 12px;">If you didn't request this, please ignore it.</p>
    </div>
</body>
</html>
"""


class SendEmail:
    @staticmethod
    def send_email(subject, recipients, html):
        mail.send(Message(subject=subject, recipients=recipients, html=html))


class OtpNotifier:
    DELIVERED = "delivered"
    LOGGED = "logged"

    def __init__(self, enabled, ttl_minutes=10):
        self.enabled = enabled
        self.ttl_minutes = ttl_minutes

    def deliver(self, email, otp):
        """Email the code, or write it to the OTP log when SMTP is not configured.

        Transport errors from Flask-Mail propagate to the caller.
        """
        if not self.enabled:
            otp_logger.warning(
                "OTP for %s: %s (set EMAIL_USER and EMAIL_PASS to send real emails)",
                email,
                otp,
            )
            return self.LOGGED
        SendEmail.send_email(
            OTP_EMAIL_SUBJECT, [email], render_otp_email(otp, self.ttl_minutes)
        )
        logger.info("OTP email sent to %s", email)
        return self.DELIVERED
