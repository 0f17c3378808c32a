"""Conector Stripe - adapter de borda para a API REST da Stripe.

Este módulo é o único ponto de IO com a Stripe.
Responsabilidades:
- HTTP client tipado (get/post/post_empty/delete)
- Codificação form-urlencoded com chaves aninhadas
- Envelope de erro da API e taxonomia de exceções
- Webhook (assinatura, tolerância de timestamp, parsing do Event)
- Modelos tipados dos recursos
"""

from .api_errors import ErrorEnvelope, RequestError, parse_error_body
from .errors import (
    ApiError,
    DeserializationError,
    RequestConstructionError,
    StripeError,
    TransportError,
)
from .form_encoding import encode_form
from .http_client import (
    API_BASE_URL,
    RequestContext,
    StripeClient,
    StripeClientConfig,
    create_stripe_client,
)
from .webhook import construct_event

__all__ = [
    "API_BASE_URL",
    "ApiError",
    "DeserializationError",
    "ErrorEnvelope",
    "RequestConstructionError",
    "RequestContext",
    "RequestError",
    "StripeClient",
    "StripeClientConfig",
    "StripeError",
    "TransportError",
    "construct_event",
    "create_stripe_client",
    "encode_form",
    "parse_error_body",
]
