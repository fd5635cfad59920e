from .otp import generate_otp
from .validation import Validation
from .send_email import SendEmail, OtpNotifier, render_otp_email
from .ledger import RazorpayLedger, build_ledger, generate_signature, verify_signature
