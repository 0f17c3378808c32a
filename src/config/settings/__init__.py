"""Agregador de settings do conector Stripe.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.stripe import (
    STRIPE_API_BASE_URL,
    STRIPE_WEBHOOK_TOLERANCE_SECONDS,
    StripeSettings,
    get_stripe_settings,
)

__all__ = [
    # Constants
    "STRIPE_API_BASE_URL",
    "STRIPE_WEBHOOK_TOLERANCE_SECONDS",
    # Base
    "BaseSettings",
    "Environment",
    # Stripe
    "StripeSettings",
    "get_base_settings",
    "get_stripe_settings",
]
