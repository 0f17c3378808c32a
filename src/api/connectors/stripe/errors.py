"""Hierarquia de erros do conector Stripe.

Separa falhas de construção, de transporte, de desserialização e erros
reportados pela própria API, para que o chamador consiga decidir o que
fazer sem inspecionar mensagens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import RequestError


class StripeError(Exception):
    """Erro base para qualquer falha do conector Stripe."""


class RequestConstructionError(StripeError):
    """Parâmetros não puderam ser codificados em form-urlencoded."""


class TransportError(StripeError):
    """Falha de rede: o servidor não foi alcançado ou a resposta não chegou."""


class DeserializationError(StripeError):
    """Resposta 2xx com corpo que não é UTF-8, não é JSON ou não bate com o tipo."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(StripeError):
    """Erro estruturado devolvido pela API (status fora de 2xx).

    Attributes:
        error: Envelope de erro já com ``http_status`` preenchido
    """

    def __init__(self, error: RequestError) -> None:
        super().__init__(error.message or f"stripe_api_error ({error.http_status})")
        self.error = error

    @property
    def http_status(self) -> int:
        return self.error.http_status

    @property
    def code(self) -> str | None:
        return self.error.code

    @property
    def message(self) -> str | None:
        return self.error.message
