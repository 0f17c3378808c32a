"""Verificação de assinatura HMAC-SHA256 do header Stripe-Signature.

Formato do header: ``t=<unix>,v1=<hex>[,v1=<hex>...]``. A mensagem assinada
é ``"<t>.<payload>"``, o que amarra o corpo ao timestamp e impede reaproveitar
uma assinatura com outro corpo.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass

# Janela máxima (segundos) entre o timestamp assinado e o relógio local
DEFAULT_TOLERANCE_SECONDS = 300

TIMESTAMP_KEY = "t"
SIGNATURE_SCHEME = "v1"


class WebhookError(ValueError):
    """Erro base para falhas de webhook."""


class MalformedHeaderError(WebhookError):
    """Header de assinatura ausente, mal formatado ou incompleto."""


class WebhookVerificationError(WebhookError):
    """Falha de verificação relevante para segurança."""


class InvalidSignatureError(WebhookVerificationError):
    """Nenhuma assinatura v1 confere com o HMAC calculado."""


class StaleTimestampError(WebhookVerificationError):
    """Timestamp assinado fora da janela de tolerância."""

    def __init__(self, timestamp: int, tolerance: int) -> None:
        super().__init__(f"timestamp_outside_tolerance ({timestamp})")
        self.timestamp = timestamp
        self.tolerance = tolerance


class PayloadParseError(WebhookError):
    """Assinatura válida, mas o payload não é um Event conhecido."""


@dataclass(frozen=True)
class SignatureHeader:
    """Header Stripe-Signature já parseado."""

    timestamp: int
    signatures: tuple[str, ...]
    # texto de ``t`` exatamente como veio; é o que entra na mensagem assinada
    raw_timestamp: str


def parse_signature_header(header: str) -> SignatureHeader:
    """Parseia o header em timestamp e lista de assinaturas v1.

    Campos de outros esquemas (ex.: v0) são ignorados.

    Raises:
        MalformedHeaderError: Campo sem ``=``, sem ``t``, sem ``v1`` ou
            ``t`` fora do formato (só dígitos ASCII).
    """
    if not header or not header.strip():
        raise MalformedHeaderError("missing_signature_header")

    timestamp_raw: str | None = None
    signatures: list[str] = []
    for item in header.split(","):
        key, sep, value = item.strip().partition("=")
        if not sep:
            raise MalformedHeaderError("header_field_without_separator")
        if key == TIMESTAMP_KEY:
            timestamp_raw = value
        elif key == SIGNATURE_SCHEME:
            signatures.append(value)

    if timestamp_raw is None:
        raise MalformedHeaderError("missing_timestamp")
    if not signatures:
        raise MalformedHeaderError("missing_v1_signature")
    # int() aceitaria "+1", "1_000" e dígitos não ASCII
    if not (timestamp_raw.isascii() and timestamp_raw.isdigit()):
        raise MalformedHeaderError("invalid_timestamp")

    return SignatureHeader(
        timestamp=int(timestamp_raw),
        signatures=tuple(signatures),
        raw_timestamp=timestamp_raw,
    )


def compute_signature(payload: str | bytes, secret: str, timestamp: int | str) -> str:
    """Calcula o HMAC-SHA256 hex de ``"<timestamp>.<payload>"``."""
    body = payload if isinstance(payload, bytes) else payload.encode("utf-8")
    signed_payload = f"{timestamp}.".encode() + body
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def secure_compare(expected: str | bytes, received: str | bytes) -> bool:
    """Compara dois digests em tempo constante.

    Não encerra no primeiro byte divergente; usar sempre no lugar de ``==``
    para material derivado de segredo.
    """
    left = expected.encode("utf-8") if isinstance(expected, str) else expected
    right = received.encode("utf-8") if isinstance(received, str) else received
    return hmac.compare_digest(left, right)


def verify_header(
    payload: str | bytes,
    header: str,
    secret: str,
    *,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    now: int | None = None,
) -> SignatureHeader:
    """Valida assinatura e frescor sem tocar no conteúdo do payload.

    Aceita se QUALQUER v1 conferir (rotação de segredo envia mais de um).

    Raises:
        MalformedHeaderError: Header inválido
        InvalidSignatureError: Nenhuma assinatura confere
        StaleTimestampError: ``now - t`` maior que ``tolerance``
    """
    parsed = parse_signature_header(header)
    expected = compute_signature(payload, secret, parsed.raw_timestamp)

    matched = False
    for candidate in parsed.signatures:
        # sem short-circuit: todas as candidatas são comparadas
        matched = secure_compare(expected, candidate) | matched
    if not matched:
        raise InvalidSignatureError("invalid_signature")

    current = int(time.time()) if now is None else now
    if current - parsed.timestamp > tolerance:
        raise StaleTimestampError(parsed.timestamp, tolerance)

    return parsed


def generate_test_header(
    payload: str | bytes,
    secret: str,
    timestamp: int | None = None,
) -> str:
    """Monta um header Stripe-Signature válido (testes e ferramentas locais)."""
    ts = int(time.time()) if timestamp is None else timestamp
    return f"t={ts},{SIGNATURE_SCHEME}={compute_signature(payload, secret, ts)}"
