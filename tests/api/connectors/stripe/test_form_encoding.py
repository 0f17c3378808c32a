from __future__ import annotations

from enum import Enum
from urllib.parse import parse_qsl

import pytest
from pydantic import BaseModel

from api.connectors.stripe.errors import RequestConstructionError
from api.connectors.stripe.form_encoding import encode_form


def _decode(body: str) -> list[tuple[str, str]]:
    return parse_qsl(body, keep_blank_values=True)


class _Interval(str, Enum):
    MONTH = "month"


class _ChargeParams(BaseModel):
    amount: int
    currency: str
    description: str | None = None
    metadata: dict[str, str] = {}


def test_flat_params() -> None:
    assert _decode(encode_form({"amount": 1000, "currency": "usd"})) == [
        ("amount", "1000"),
        ("currency", "usd"),
    ]


def test_nested_mapping_uses_brackets() -> None:
    body = encode_form({"metadata": {"order_id": "42", "source": "web"}})
    assert _decode(body) == [
        ("metadata[order_id]", "42"),
        ("metadata[source]", "web"),
    ]


def test_list_of_mappings_uses_indexes() -> None:
    body = encode_form({"items": [{"plan": "gold", "quantity": 2}, {"plan": "silver"}]})
    assert _decode(body) == [
        ("items[0][plan]", "gold"),
        ("items[0][quantity]", "2"),
        ("items[1][plan]", "silver"),
    ]


def test_list_of_scalars() -> None:
    assert _decode(encode_form({"expand": ["customer", "invoice"]})) == [
        ("expand[0]", "customer"),
        ("expand[1]", "invoice"),
    ]


def test_none_values_are_omitted() -> None:
    assert _decode(encode_form({"amount": 1, "description": None})) == [("amount", "1")]


def test_booleans_and_enums() -> None:
    body = encode_form({"capture": False, "interval": _Interval.MONTH})
    assert _decode(body) == [("capture", "false"), ("interval", "month")]


def test_reserved_characters_are_escaped() -> None:
    body = encode_form({"description": "a&b=c d"})
    assert "&b=" not in body
    assert _decode(body) == [("description", "a&b=c d")]


def test_pydantic_model_params() -> None:
    params = _ChargeParams(amount=500, currency="brl", metadata={"k": "v"})
    assert _decode(encode_form(params)) == [
        ("amount", "500"),
        ("currency", "brl"),
        ("metadata[k]", "v"),
    ]


def test_non_mapping_params_raise() -> None:
    with pytest.raises(RequestConstructionError, match="mapping"):
        encode_form(["amount", 1])


def test_unsupported_value_raises() -> None:
    with pytest.raises(RequestConstructionError, match="metadata\\[blob\\]"):
        encode_form({"metadata": {"blob": b"raw"}})
