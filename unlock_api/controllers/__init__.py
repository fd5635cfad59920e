from .otp import OtpController
from .payment import PaymentController
from .status import StatusController
