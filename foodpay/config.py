from pydantic import BaseModel, ConfigDict, SecretStr, field_validator
from dotenv import load_dotenv
from typing import Optional, Mapping
from .errors import ConfigurationError
import os


GATEWAYS = ("razorpay", "mock")


class PaymentSettings(BaseModel):
    model_config = ConfigDict(frozen=True)    # read once at startup, never mutated

    razorpay_key_id: str
    razorpay_key_secret: SecretStr
    jwt_secret: SecretStr
    jwt_algorithm: str = "HS256"
    payment_gateway: str = "razorpay"
    log_level: str = "INFO"

    @field_validator("payment_gateway")
    @classmethod
    def known_gateway(cls, value):
        value = value.lower()
        if value not in GATEWAYS:
            raise ValueError(f"must be one of {', '.join(GATEWAYS)}")
        return value


REQUIRED = {
    "RAZORPAY_KEY_ID": "razorpay_key_id",
    "RAZORPAY_KEY_SECRET": "razorpay_key_secret",
    "JWT_SECRET": "jwt_secret",
}

OPTIONAL = {
    "JWT_ALGORITHM": "jwt_algorithm",
    "PAYMENT_GATEWAY": "payment_gateway",
    "LOG_LEVEL": "log_level",
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PaymentSettings:
    """Read settings from the environment (and a .env file if present).

    Raises ConfigurationError when a required variable is missing or blank.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    #1. required values must be present and non-blank
    missing = [name for name in REQUIRED if not (environ.get(name) or "").strip()]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    values = {field: environ[name].strip() for name, field in REQUIRED.items()}

    #2. optional values fall back to model defaults
    for name, field in OPTIONAL.items():
        if (environ.get(name) or "").strip():
            values[field] = environ[name].strip()

    #3. validate
    try:
        return PaymentSettings(**values)
    except ValueError as e:
        raise ConfigurationError(f"Invalid payment settings: {e}") from e
