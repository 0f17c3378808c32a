import json
from unittest.mock import patch

import pytest

from api.connectors.stripe.resources import Charge, EventType
from api.connectors.stripe.webhook import (
    InvalidSignatureError,
    MalformedHeaderError,
    PayloadParseError,
    StaleTimestampError,
    WebhookError,
    construct_event,
    generate_test_header,
)

SECRET = "whsec_test_secret"
TIMESTAMP = 1614556800


def _event_payload(object_json: dict[str, object] | None = None) -> str:
    return json.dumps(
        {
            "id": "evt_1",
            "object": "event",
            "type": "charge.succeeded",
            "created": TIMESTAMP,
            "livemode": False,
            "data": {
                "object": object_json
                or {
                    "id": "ch_123",
                    "object": "charge",
                    "amount": 1000,
                    "currency": "usd",
                    "paid": True,
                }
            },
        }
    )


def test_construct_event_ok() -> None:
    payload = _event_payload()
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    event = construct_event(payload, header, SECRET, now=TIMESTAMP + 10)

    assert event.id == "evt_1"
    assert event.event_type is EventType.CHARGE_SUCCEEDED
    assert isinstance(event.data.object, Charge)
    assert event.data.object.id == "ch_123"


def test_construct_event_accepts_bytes_payload() -> None:
    payload = _event_payload().encode("utf-8")
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    event = construct_event(payload, header, SECRET, now=TIMESTAMP)

    assert event.event_type is EventType.CHARGE_SUCCEEDED


def test_construct_event_stale_timestamp() -> None:
    payload = _event_payload()
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    with pytest.raises(StaleTimestampError):
        construct_event(payload, header, SECRET, now=TIMESTAMP + 400)


def test_construct_event_invalid_signature() -> None:
    payload = _event_payload()
    header = generate_test_header(payload, SECRET, TIMESTAMP)
    tampered = payload.replace("1000", "9000")

    with pytest.raises(InvalidSignatureError):
        construct_event(tampered, header, SECRET, now=TIMESTAMP)


def test_construct_event_malformed_header() -> None:
    with pytest.raises(MalformedHeaderError):
        construct_event(_event_payload(), "v1=deadbeef", SECRET, now=TIMESTAMP)


def test_unknown_object_discriminant_is_parse_error() -> None:
    payload = _event_payload({"id": "x_1", "object": "mystery_object"})
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    with pytest.raises(PayloadParseError):
        construct_event(payload, header, SECRET, now=TIMESTAMP)


def test_invalid_json_after_valid_signature_is_parse_error() -> None:
    payload = "{invalid}"
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    with pytest.raises(PayloadParseError):
        construct_event(payload, header, SECRET, now=TIMESTAMP)


def test_verification_failure_never_parses_payload() -> None:
    payload = "{invalid}"
    header = f"t={TIMESTAMP},v1={'0' * 64}"

    with patch(
        "api.connectors.stripe.webhook.receive.Event.model_validate_json"
    ) as parse:
        with pytest.raises(InvalidSignatureError):
            construct_event(payload, header, SECRET, now=TIMESTAMP)

    parse.assert_not_called()


def test_all_errors_are_webhook_errors() -> None:
    for error in (
        MalformedHeaderError,
        InvalidSignatureError,
        StaleTimestampError,
        PayloadParseError,
    ):
        assert issubclass(error, WebhookError)
        assert issubclass(error, ValueError)


def test_signed_bytes_with_invalid_utf8_are_parse_error() -> None:
    payload = b'{"id": "\xff", "type": "charge.succeeded", "data": {}}'
    header = generate_test_header(payload, SECRET, TIMESTAMP)

    with pytest.raises(PayloadParseError):
        construct_event(payload, header, SECRET, now=TIMESTAMP)


def test_unsigned_bytes_with_invalid_utf8_fail_verification_first() -> None:
    payload = b'{"id": "\xff"}'
    header = f"t={TIMESTAMP},v1={'0' * 64}"

    with pytest.raises(InvalidSignatureError):
        construct_event(payload, header, SECRET, now=TIMESTAMP)
