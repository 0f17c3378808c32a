"""Construção de Event a partir de um webhook recebido (sem PII nos logs)."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..resources.event import Event
from .signature import (
    DEFAULT_TOLERANCE_SECONDS,
    InvalidSignatureError,
    MalformedHeaderError,
    PayloadParseError,
    StaleTimestampError,
    verify_header,
)

logger = logging.getLogger(__name__)


def construct_event(
    payload: str | bytes,
    signature_header: str,
    secret: str,
    *,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    now: int | None = None,
) -> Event:
    """Valida assinatura e timestamp e só então parseia o Event.

    Args:
        payload: Corpo bruto do request (exatamente como recebido)
        signature_header: Valor do header Stripe-Signature
        secret: Signing secret do endpoint (whsec_...)
        tolerance: Idade máxima do timestamp em segundos
        now: Unix time atual (injetável para testes)

    Raises:
        MalformedHeaderError: Header ausente ou mal formatado
        InvalidSignatureError: Assinatura não confere
        StaleTimestampError: Timestamp fora da tolerância
        PayloadParseError: JSON inválido ou evento/objeto desconhecido

    Returns:
        Event tipado
    """
    try:
        verify_header(payload, signature_header, secret, tolerance=tolerance, now=now)
    except MalformedHeaderError as exc:
        logger.info("stripe_webhook_malformed_header", extra={"reason": str(exc)})
        raise
    except InvalidSignatureError:
        logger.warning("stripe_webhook_invalid_signature")
        raise
    except StaleTimestampError as exc:
        logger.warning(
            "stripe_webhook_stale_timestamp",
            extra={"timestamp": exc.timestamp, "tolerance": exc.tolerance},
        )
        raise

    try:
        event = Event.model_validate_json(payload)
    except ValidationError as exc:
        logger.info(
            "stripe_webhook_payload_invalid",
            extra={"error_count": exc.error_count()},
        )
        raise PayloadParseError(f"invalid_event_payload: {exc}") from exc

    logger.debug(
        "stripe_webhook_verified",
        extra={"event_type": event.event_type.value},
    )
    return event
