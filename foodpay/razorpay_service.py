"""Razorpay order creation and payment signature verification.

``PaymentService`` owns its gateway client. Build one per process from
``PaymentSettings``; tests pass their own ``client``.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from fractions import Fraction
from numbers import Integral, Real
from typing import Any, Dict, Optional
import hashlib
import hmac
import time

import razorpay

from .config import PaymentSettings
from .errors import InvalidAmountError, OrderCreationFailed, OrderFetchFailed, describe_gateway_error
from .logging_config import get_logger
from .mockGateway import MockRazorpayClient

logger = get_logger(__name__)

CURRENCY = "INR"


def _as_decimal(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid amount: {amount!r}. Amount must be a number.")
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, Fraction):
        return Decimal(amount.numerator) / Decimal(amount.denominator)
    if isinstance(amount, Integral):
        return Decimal(int(amount))
    if isinstance(amount, Real):
        # str() first so 10.005 is taken as written, not as its binary approximation
        try:
            return Decimal(str(float(amount)))
        except (OverflowError, ValueError) as e:
            raise InvalidAmountError(f"Invalid amount: {amount!r}") from e
    raise InvalidAmountError(f"Invalid amount: {amount!r}. Amount must be a number.")


def to_minor_units(amount) -> int:
    """Convert rupees to paise, rounding half-up to a whole paisa."""
    value = _as_decimal(amount)
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError(f"Invalid amount: {amount!r}. Amount must be a positive number.")

    try:
        paise = (value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        # more digits than the decimal context can hold
        raise InvalidAmountError(f"Invalid amount: {amount!r}. Amount is too large.") from e

    if paise < 1:
        raise InvalidAmountError(f"Invalid amount: {amount!r}. Amount is below one paisa.")
    return int(paise)


def generate_signature(secret: str, order_id: str, payment_id: str) -> str:
    # Formula: HMAC_SHA256(order_id + "|" + payment_id, secret)
    msg = f"{order_id}|{payment_id}"
    return hmac.new(
        bytes(secret, "utf-8"),
        bytes(msg, "utf-8"),
        hashlib.sha256,
    ).hexdigest()


def build_gateway_client(settings: PaymentSettings):
    auth = (settings.razorpay_key_id, settings.razorpay_key_secret.get_secret_value())
    if settings.payment_gateway == "mock":
        return MockRazorpayClient(auth=auth)
    return razorpay.Client(auth=auth)


class PaymentService:
    def __init__(self, settings: PaymentSettings, client: Optional[Any] = None):
        self._key_secret = settings.razorpay_key_secret.get_secret_value()
        self.client = client if client is not None else build_gateway_client(settings)
        logger.info("payment_service_ready", gateway=settings.payment_gateway)

    def create_order(self, amount) -> Dict[str, Any]:
        """Create a gateway order for ``amount`` rupees and return it verbatim.

        Raises InvalidAmountError before any network call for bad input, and
        OrderCreationFailed when the gateway call fails.
        """
        amount_in_paise = to_minor_units(amount)

        data = {
            "amount": amount_in_paise,
            "currency": CURRENCY,
            "receipt": f"rcpt_{int(time.time() * 1000)}",
            "payment_capture": 1,    # auto-capture
        }

        try:
            order = self.client.order.create(data=data)
        except Exception as e:
            failure = OrderCreationFailed(diagnostic=describe_gateway_error(e))
            logger.error("order_creation_failed", amount_in_paise=amount_in_paise,
                         diagnostic=failure.diagnostic, exc_info=True)
            raise failure from e

        logger.info("order_created", order_id=order.get("id"), amount_in_paise=amount_in_paise)
        return order

    def get_order_status(self, order_id: str) -> Dict[str, Any]:
        if not order_id:
            raise OrderFetchFailed(diagnostic="order id is required")

        try:
            return self.client.order.fetch(order_id)
        except Exception as e:
            failure = OrderFetchFailed(diagnostic=describe_gateway_error(e))
            logger.error("order_fetch_failed", order_id=order_id,
                         diagnostic=failure.diagnostic, exc_info=True)
            raise failure from e

    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Return True only if ``signature`` is the gateway's HMAC for this order/payment.

        Never raises: missing input, a missing secret or any internal error
        is reported as False.
        """
        try:
            if not all(isinstance(value, str) and value for value in (order_id, payment_id, signature)):
                logger.warning("signature_verification_missing_params")
                return False
            if not self._key_secret:
                logger.error("signature_verification_no_secret")
                return False

            expected = generate_signature(self._key_secret, order_id, payment_id)
            is_valid = hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
        except Exception:
            logger.exception("signature_verification_error", order_id=order_id)
            return False

        logger.info("signature_verified", order_id=order_id, payment_id=payment_id, valid=is_valid)
        return is_valid
