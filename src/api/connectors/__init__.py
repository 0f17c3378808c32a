"""Connectors — adapters de borda para APIs externas.

Estrutura:
- stripe/: Stripe API (cliente HTTP, recursos, webhooks)
"""

__all__: list[str] = []
