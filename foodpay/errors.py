from typing import Optional


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""


class InvalidAmountError(ValueError):
    pass


class PaymentGatewayError(Exception):
    """A gateway call failed.

    ``public_message`` is safe to show to end users. ``diagnostic`` holds the
    underlying failure detail and is only ever logged.
    """

    public_message = "Payment gateway error"

    def __init__(self, diagnostic: str = "", public_message: Optional[str] = None):
        if public_message is not None:
            self.public_message = public_message
        self.diagnostic = diagnostic
        super().__init__(self.public_message)

    def __str__(self):
        return self.public_message


class OrderCreationFailed(PaymentGatewayError):
    public_message = "Failed to create payment order. Please try again."


class OrderFetchFailed(PaymentGatewayError):
    public_message = "Failed to fetch payment order status."


def describe_gateway_error(error: Exception) -> str:
    """Build a diagnostic string from a gateway/SDK exception."""
    parts = [f"{type(error).__name__}: {error}"]

    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        parts.append(f"status_code={status_code}")

    # razorpay SDK errors carry the API error description in `error`
    detail = getattr(error, "error", None)
    if isinstance(detail, dict) and detail.get("description"):
        parts.append(f"description={detail['description']}")

    return " ".join(parts)
