class AppError(Exception):
    status_code = 400
    message = "Bad Request"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    message = "Validation Error"


class NotFoundError(AppError):
    message = "User not found"


class InvalidOtpError(AppError):
    message = "Invalid/Expired OTP"


class SignatureMismatchError(AppError):
    message = "Invalid Signature"


class StorageError(AppError):
    status_code = 500
    message = "Server Error"


class GatewayError(AppError):
    status_code = 500
    message = "Razorpay Error"


class DeliveryError(AppError):
    status_code = 500
    message = "Server Error / Email Failed"
