"""Webhook Stripe: assinatura, tolerância de timestamp e parsing do Event."""

from .receive import construct_event
from .signature import (
    DEFAULT_TOLERANCE_SECONDS,
    InvalidSignatureError,
    MalformedHeaderError,
    PayloadParseError,
    SignatureHeader,
    StaleTimestampError,
    WebhookError,
    WebhookVerificationError,
    compute_signature,
    generate_test_header,
    parse_signature_header,
    secure_compare,
    verify_header,
)

__all__ = [
    "DEFAULT_TOLERANCE_SECONDS",
    "InvalidSignatureError",
    "MalformedHeaderError",
    "PayloadParseError",
    "SignatureHeader",
    "StaleTimestampError",
    "WebhookError",
    "WebhookVerificationError",
    "compute_signature",
    "construct_event",
    "generate_test_header",
    "parse_signature_header",
    "secure_compare",
    "verify_header",
]
