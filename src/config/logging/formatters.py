"""Formatter JSON com os campos obrigatórios de todo log."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem estável na saída)
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "WARNING", "logger": "api.connectors.stripe.api_logging",
         "message": "stripe_api_error", "correlation_id": "abc-123",
         "service": "stripe_connector", "status_code": 402, "error_code": "card_declined"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
