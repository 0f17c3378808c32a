"""Helpers de logging para a API Stripe (sem segredos nem corpo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import RequestError

logger = logging.getLogger(__name__)


def log_api_error(
    error: RequestError,
    method: str,
    path: str,
) -> None:
    """Loga erro da Stripe sem expor mensagem ou dados do cliente."""
    logger.warning(
        "stripe_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": error.http_status,
            "error_type": error.error_type,
            "error_code": error.code,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "stripe_request_ok",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )


def log_transport_error(method: str, path: str, reason: str) -> None:
    logger.error(
        "stripe_transport_error",
        extra={"method": method, "path": path, "reason": reason},
    )
