"""Cliente HTTP tipado para a API REST da Stripe.

Cada chamada faz exatamente um round trip:
- Monta URL a partir da base fixa + path relativo
- Envia Authorization Bearer, Content-Type form e Stripe-Account opcional
- Corpo de POST em form-urlencoded com chaves aninhadas (não JSON)
- 2xx: corpo inteiro bufferizado, decodificado em UTF-8 e validado no tipo pedido
- Fora de 2xx: envelope de erro da Stripe vira ApiError (nunca crash)

Sem retry, sem backoff: falhas são devolvidas ao chamador como exceções tipadas.
O contexto (conta conectada) é imutável; clientes derivados compartilham o
mesmo httpx.AsyncClient e nunca alteram o original.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .api_errors import parse_error_body
from .api_logging import log_api_error, log_success, log_transport_error
from .errors import ApiError, DeserializationError, TransportError
from .form_encoding import encode_form

if TYPE_CHECKING:
    from types import TracebackType

    from config.settings import StripeSettings

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

API_BASE_URL = "https://api.stripe.com/v1/"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
STRIPE_ACCOUNT_HEADER = "Stripe-Account"


def _validate_header_value(name: str, value: str) -> str:
    """Rejeita valores que não podem ir num header HTTP (CR/LF, controle, não-ASCII)."""
    if not value:
        raise ValueError(f"{name} não pode ser vazio")
    for char in value:
        if char != "\t" and not (" " <= char <= "~"):
            raise ValueError(f"{name} contém caractere inválido para header HTTP")
    return value


@dataclass(frozen=True)
class RequestContext:
    """Parâmetros transversais enviados em toda requisição.

    Attributes:
        stripe_account: ID da conta conectada (header Stripe-Account)
    """

    stripe_account: str | None = None

    def __post_init__(self) -> None:
        if self.stripe_account is not None:
            _validate_header_value("stripe_account", self.stripe_account)


@dataclass(frozen=True)
class StripeClientConfig:
    """Configuração do transporte (imutável, compartilhada entre clientes derivados)."""

    base_url: str = API_BASE_URL
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # cópia somente leitura: o dict do chamador pode mudar depois
        object.__setattr__(
            self, "default_headers", MappingProxyType(dict(self.default_headers))
        )


@lru_cache(maxsize=128)
def _type_adapter(response_model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_model)


class StripeClient:
    """Cliente para a API Stripe.

    Operações: get, post, post_empty, delete. ``response_model`` é qualquer
    tipo que o pydantic saiba validar (BaseModel, dict[str, Any], unions...).

    Exemplo:
        client = StripeClient("sk_test_123")
        charge = await client.post(
            "/charges", {"amount": 1000, "currency": "usd"}, Charge
        )
        connected = client.with_stripe_account("acct_123")
    """

    def __init__(
        self,
        secret_key: str,
        *,
        context: RequestContext | None = None,
        config: StripeClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not secret_key or not secret_key.strip():
            logger.error("stripe_secret_key_missing")
            raise ValueError(
                "secret_key é obrigatório. Verifique se STRIPE_SECRET_KEY está configurado."
            )
        _validate_header_value("secret_key", secret_key)
        self._secret_key = secret_key
        self._context = context or RequestContext()
        self._config = config or StripeClientConfig()
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
        )

    @property
    def context(self) -> RequestContext:
        return self._context

    def with_context(self, context: RequestContext) -> StripeClient:
        """Retorna novo cliente com outro contexto, compartilhando a conexão.

        O cliente atual não é alterado.
        """
        return StripeClient(
            self._secret_key,
            context=context,
            config=self._config,
            http_client=self._http,
        )

    def with_stripe_account(self, account_id: str) -> StripeClient:
        """Atalho para agir em nome de uma conta conectada."""
        return self.with_context(RequestContext(stripe_account=account_id))

    async def get(self, path: str, response_model: type[T]) -> T:
        return await self._send("GET", path, response_model)

    async def post(self, path: str, params: Any, response_model: type[T]) -> T:
        """POST com corpo form-urlencoded.

        Raises:
            RequestConstructionError: Se params não puder ser codificado
        """
        body = encode_form(params)
        return await self._send("POST", path, response_model, content=body)

    async def post_empty(self, path: str, response_model: type[T]) -> T:
        return await self._send("POST", path, response_model)

    async def delete(self, path: str, response_model: type[T]) -> T:
        return await self._send("DELETE", path, response_model)

    async def aclose(self) -> None:
        """Fecha a conexão, se este cliente for o dono dela."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> StripeClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            raise ValueError(f"path deve começar com '/': {path!r}")
        return f"{self._config.base_url}{path[1:]}"

    def _headers(self) -> dict[str, str]:
        headers = {
            **self._config.default_headers,
            "Authorization": f"Bearer {self._secret_key}",
            "Content-Type": FORM_CONTENT_TYPE,
        }
        if self._context.stripe_account is not None:
            headers[STRIPE_ACCOUNT_HEADER] = self._context.stripe_account
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        response_model: type[T],
        content: str | None = None,
    ) -> T:
        url = self._url(path)
        try:
            response = await self._http.request(
                method,
                url,
                headers=self._headers(),
                content=content,
            )
        except httpx.HTTPError as exc:
            log_transport_error(method, path, type(exc).__name__)
            raise TransportError(f"stripe_transport_error: {type(exc).__name__}") from exc

        raw = response.content
        status = response.status_code
        if not 200 <= status <= 299:
            error = parse_error_body(raw.decode("utf-8", errors="replace"), status)
            log_api_error(error, method, path)
            raise ApiError(error)

        log_success(method, path, status)
        return _decode_success(raw, status, response_model)


def _decode_success(raw: bytes, status: int, response_model: type[T]) -> T:
    """Decodifica corpo 2xx no tipo pedido."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DeserializationError("response body is not valid UTF-8", status) from exc
    try:
        return _type_adapter(response_model).validate_json(text)
    except ValidationError as exc:
        logger.warning(
            "stripe_response_invalid",
            extra={"status_code": status, "error_count": exc.error_count()},
        )
        raise DeserializationError(f"failed to deserialize response: {exc}", status) from exc


def create_stripe_client(
    settings: StripeSettings | None = None,
) -> StripeClient:
    """Factory para criar cliente Stripe a partir das settings.

    Args:
        settings: StripeSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente configurado (com Stripe-Account se STRIPE_ACCOUNT estiver definido).
    """
    # Import local para evitar dependência circular
    from config.settings import get_stripe_settings

    stripe = settings or get_stripe_settings()
    config = StripeClientConfig(
        base_url=stripe.api_base_url,
        timeout_seconds=stripe.request_timeout_seconds,
    )
    context = RequestContext(stripe_account=stripe.stripe_account or None)
    return StripeClient(stripe.secret_key, context=context, config=config)
