"""Codificação application/x-www-form-urlencoded com chaves aninhadas.

A Stripe não aceita JSON no corpo: dicionários e listas são achatados com
a sintaxe de colchetes, ex.: ``metadata[order_id]=42`` e
``items[0][price]=price_123``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from .errors import RequestConstructionError


def encode_form(params: Any) -> str:
    """Codifica parâmetros (dict ou modelo pydantic) como form-urlencoded.

    Valores None são omitidos; booleanos viram ``true``/``false``.

    Raises:
        RequestConstructionError: Se params não for um mapeamento ou
            contiver valores sem representação em form.
    """
    if isinstance(params, BaseModel):
        params = params.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not isinstance(params, Mapping):
        raise RequestConstructionError(
            f"params must be a mapping, got {type(params).__name__}"
        )
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
        return
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
        return
    pairs.append((prefix, _scalar(prefix, value)))


def _scalar(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, float)):
        return str(value)
    raise RequestConstructionError(
        f"unsupported value for form field {key!r}: {type(value).__name__}"
    )
