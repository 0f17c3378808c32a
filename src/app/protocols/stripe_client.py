"""Protocolo do cliente Stripe usado pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class StripeClientProtocol(Protocol):
    """Contrato mínimo do transporte Stripe."""

    async def get(self, path: str, response_model: type[T]) -> T: ...

    async def post(self, path: str, params: Any, response_model: type[T]) -> T: ...

    async def post_empty(self, path: str, response_model: type[T]) -> T: ...

    async def delete(self, path: str, response_model: type[T]) -> T: ...
