class PaygateError(Exception):
    """Base exception for Paygate application.

    Carries the HTTP status the API boundary should answer with.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(PaygateError):
    """Raised when a request is missing required fields."""

    status_code = 400


class GatewayError(PaygateError):
    """Raised when the payment gateway answers non-2xx or cannot be reached."""

    status_code = 500


class SignatureError(PaygateError):
    """Raised when a webhook signature does not match the payload."""

    status_code = 401


class NotFoundError(PaygateError):
    """Raised when a stored transaction does not exist."""

    status_code = 404


class EventIntakeError(PaygateError):
    """Raised when a verified webhook event cannot be recorded."""

    pass
