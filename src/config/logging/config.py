"""Configuração centralizada de logging.

Logging JSON estruturado com campos obrigatórios (correlation_id, service,
level, logger, message). Chamado uma vez pelo bootstrap; os módulos usam
``logging.getLogger(__name__)`` normalmente.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="stripe_connector")

    logger = get_logger(__name__)
    logger.info("stripe_request_ok", extra={"status_code": 200})

Nunca logar secret key, signing secret, corpo de webhook ou dados de cartão.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "stripe_connector"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um fallback determinístico foi aplicado (sem PII).

    Ex.: corpo de erro da Stripe que não parseia e vira envelope sintético.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "stripe_error_envelope").
        reason: Razão do fallback, sem dados do cliente.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
