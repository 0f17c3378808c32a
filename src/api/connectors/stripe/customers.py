"""Operações tipadas de Customer sobre o StripeClient."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .resources import Customer, Deleted

if TYPE_CHECKING:
    from app.protocols.stripe_client import StripeClientProtocol


async def create_customer(
    client: StripeClientProtocol,
    params: dict[str, Any] | None = None,
) -> Customer:
    if not params:
        return await client.post_empty("/customers", Customer)
    return await client.post("/customers", params, Customer)


async def retrieve_customer(client: StripeClientProtocol, customer_id: str) -> Customer:
    return await client.get(f"/customers/{customer_id}", Customer)


async def delete_customer(client: StripeClientProtocol, customer_id: str) -> Deleted:
    return await client.delete(f"/customers/{customer_id}", Deleted)
