"""
structlog setup for the payment service.

Entries go through stdlib logging as JSON lines. Gateway credentials and
payment signatures are masked before rendering.
"""
import logging
import sys
from typing import Any, Dict

import structlog

SENSITIVE_KEYS = frozenset({"key_secret", "razorpay_key_secret", "jwt_secret", "signature", "authorization"})
MASK = "***"


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict) -> Dict:
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = MASK
    return event_dict


def configure_logging(level: str = "INFO"):
    log_level = getattr(logging, level.upper(), logging.INFO)

    # basicConfig is a no-op once uvicorn/pytest have installed handlers; the level still applies
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_sensitive,
            structlog.processors.dict_tracebacks,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__):
    # initial values keep the proxy lazy, so configure_logging() still applies to module-level loggers
    return structlog.get_logger(name, service="foodpay")
