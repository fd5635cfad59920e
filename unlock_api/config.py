import os
from dotenv import load_dotenv

load_dotenv()

PLACEHOLDER_MONGO_URI = "mongodb+srv://<username>:<password>@cluster0.mongodb.net/valentineDB?retryWrites=true&w=majority"
PLACEHOLDER_RAZORPAY_KEY_ID = "YOUR_RAZORPAY_KEY_ID"
PLACEHOLDER_RAZORPAY_KEY_SECRET = "YOUR_RAZORPAY_KEY_SECRET"

port = int(os.getenv("PORT", "3000"))
log_level = os.getenv("LOG_LEVEL", "INFO")

mongo_uri = os.getenv("MONGO_URI", PLACEHOLDER_MONGO_URI)
mongo_timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

razorpay_key_id = os.getenv("RAZORPAY_KEY_ID", PLACEHOLDER_RAZORPAY_KEY_ID)
razorpay_key_secret = os.getenv("RAZORPAY_KEY_SECRET", PLACEHOLDER_RAZORPAY_KEY_SECRET)
razorpay_base_url = os.getenv("RAZORPAY_BASE_URL", "https://api.razorpay.com/v1")
ledger_timeout = float(os.getenv("LEDGER_TIMEOUT", "15"))

email_user = os.getenv("EMAIL_USER", "")
email_pass = os.getenv("EMAIL_PASS", "")
mail_server = os.getenv("MAIL_SERVER", "smtp.gmail.com")
mail_port = int(os.getenv("MAIL_PORT", "465"))

otp_ttl_minutes = int(os.getenv("OTP_TTL_MINUTES", "10"))
payment_currency = os.getenv("PAYMENT_CURRENCY", "INR")
payment_settlement_amount = int(os.getenv("PAYMENT_SETTLEMENT_AMOUNT", "499"))
