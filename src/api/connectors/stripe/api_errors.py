"""Envelope de erro da API Stripe e helpers de parsing."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.logging import log_fallback

logger = logging.getLogger(__name__)


class RequestError(BaseModel):
    """Objeto ``error`` retornado pela API em respostas não-2xx.

    ``http_status`` nunca vem do corpo: é preenchido pelo transporte.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    http_status: int = Field(default=0, exclude=True)
    error_type: str | None = Field(default=None, alias="type")
    message: str | None = None
    code: str | None = None
    decline_code: str | None = None
    param: str | None = None
    charge: str | None = None
    doc_url: str | None = None

    @property
    def is_card_error(self) -> bool:
        return self.error_type == "card_error"


class ErrorEnvelope(BaseModel):
    """Wrapper ``{"error": {...}}`` das respostas de erro."""

    model_config = ConfigDict(extra="ignore")

    error: RequestError


def parse_error_body(body: str, http_status: int) -> RequestError:
    """Extrai o erro estruturado do corpo de uma resposta não-2xx.

    Se o corpo não bater com o envelope, monta um envelope sintético com a
    falha de parsing na mensagem. O chamador sempre recebe o status HTTP.

    Args:
        body: Corpo da resposta já decodificado
        http_status: Status HTTP da resposta

    Returns:
        RequestError com ``http_status`` preenchido
    """
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as exc:
        log_fallback(logger, "stripe_error_envelope", reason="unparseable_error_body")
        envelope = ErrorEnvelope(
            error=RequestError(message=f"failed to deserialize error: {exc}"),
        )
    return envelope.error.model_copy(update={"http_status": http_status})
