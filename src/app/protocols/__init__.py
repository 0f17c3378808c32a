"""Protocolos e contratos do core da aplicação."""

from .stripe_client import StripeClientProtocol

__all__ = [
    "StripeClientProtocol",
]
