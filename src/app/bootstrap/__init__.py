"""Bootstrap — composition root do conector Stripe.

Configura logging, valida settings e entrega o cliente e o verificador de
webhook já ligados à configuração do ambiente.

Uso:
    from app.bootstrap import initialize_app, get_stripe_client

    initialize_app()
    client = get_stripe_client()
    event = construct_stripe_event(raw_body, request.headers["Stripe-Signature"])
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_stripe_settings

if TYPE_CHECKING:
    from api.connectors.stripe import StripeClient
    from api.connectors.stripe.resources import Event

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging e valida settings. Chamar uma vez no startup."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"stripe: {error}" for error in get_stripe_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.requires_strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_stripe_client() -> StripeClient:
    """Cliente raiz (singleton). Derivar por conta com ``with_stripe_account``."""
    from api.connectors.stripe import create_stripe_client

    return create_stripe_client(get_stripe_settings())


def construct_stripe_event(payload: str | bytes, signature_header: str) -> Event:
    """Verifica um webhook usando o signing secret e a tolerância configurados.

    Raises:
        ValueError: Se STRIPE_WEBHOOK_SECRET não estiver configurado
        WebhookError: Subclasses conforme a falha (header, assinatura, timestamp, payload)
    """
    from api.connectors.stripe.webhook import construct_event

    settings = get_stripe_settings()
    if not settings.webhook_secret:
        raise ValueError("STRIPE_WEBHOOK_SECRET não configurado")
    return construct_event(
        payload,
        signature_header,
        settings.webhook_secret,
        tolerance=settings.webhook_tolerance_seconds,
    )
