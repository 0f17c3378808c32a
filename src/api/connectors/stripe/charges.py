"""Operações tipadas de Charge sobre o StripeClient."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .resources import Charge

if TYPE_CHECKING:
    from app.protocols.stripe_client import StripeClientProtocol


async def create_charge(client: StripeClientProtocol, params: dict[str, Any]) -> Charge:
    """Cria cobrança. ``params`` segue o formato da API (amount, currency, ...)."""
    return await client.post("/charges", params, Charge)


async def retrieve_charge(client: StripeClientProtocol, charge_id: str) -> Charge:
    return await client.get(f"/charges/{charge_id}", Charge)


async def capture_charge(client: StripeClientProtocol, charge_id: str) -> Charge:
    return await client.post_empty(f"/charges/{charge_id}/capture", Charge)
