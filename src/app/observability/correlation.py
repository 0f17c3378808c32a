"""correlation_id por contexto de execução, injetado nos logs.

Usa ContextVar: cada task asyncio (ou thread) enxerga o próprio valor, então
várias chamadas concorrentes ao StripeClient não misturam ids.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        event = construct_event(body, signature, secret)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id atual (string vazia se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID4 se None.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
