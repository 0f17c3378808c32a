"""Settings do conector Stripe.

Credenciais, URL base da API e parâmetros de verificação de webhook.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API
STRIPE_API_BASE_URL: str = "https://api.stripe.com/v1/"
STRIPE_WEBHOOK_TOLERANCE_SECONDS: int = 300


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do conector Stripe.

    Attributes:
        secret_key: Chave secreta da API (sk_live_/sk_test_)
        webhook_secret: Signing secret do endpoint de webhook (whsec_)
        stripe_account: Conta conectada padrão (header Stripe-Account)
        api_base_url: URL base com versão, terminando em "/"
        request_timeout_seconds: Timeout das requisições HTTP
        webhook_tolerance_seconds: Idade máxima aceita do timestamp assinado
    """

    # Credenciais (carregadas de env ou Secret Manager)
    secret_key: str = ""
    webhook_secret: str = ""
    stripe_account: str = ""

    # API
    api_base_url: str = STRIPE_API_BASE_URL
    request_timeout_seconds: float = 30.0

    # Webhook
    webhook_tolerance_seconds: int = STRIPE_WEBHOOK_TOLERANCE_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.secret_key:
            errors.append("STRIPE_SECRET_KEY não configurado")

        if not self.webhook_secret:
            errors.append("STRIPE_WEBHOOK_SECRET não configurado")

        if not self.api_base_url.startswith("https://"):
            errors.append("STRIPE_API_BASE_URL deve usar https")

        if self.request_timeout_seconds <= 0:
            errors.append("STRIPE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.webhook_tolerance_seconds <= 0:
            errors.append("STRIPE_WEBHOOK_TOLERANCE_SECONDS deve ser > 0")

        return errors


def _normalize_base_url(url: str) -> str:
    """Garante "/" final para concatenar paths relativos."""
    return url if url.endswith("/") else f"{url}/"


def _load_from_env() -> StripeSettings:
    """Carrega StripeSettings a partir de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", ""),
        stripe_account=os.getenv("STRIPE_ACCOUNT", ""),
        api_base_url=_normalize_base_url(
            os.getenv("STRIPE_API_BASE_URL", STRIPE_API_BASE_URL)
        ),
        request_timeout_seconds=float(
            os.getenv("STRIPE_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        webhook_tolerance_seconds=int(
            os.getenv(
                "STRIPE_WEBHOOK_TOLERANCE_SECONDS",
                str(STRIPE_WEBHOOK_TOLERANCE_SECONDS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
