from __future__ import annotations

import hashlib
import hmac
from unittest.mock import patch

import pytest

from api.connectors.stripe.webhook.signature import (
    InvalidSignatureError,
    MalformedHeaderError,
    StaleTimestampError,
    WebhookVerificationError,
    compute_signature,
    generate_test_header,
    parse_signature_header,
    secure_compare,
    verify_header,
)

SECRET = "whsec_test_secret"
TIMESTAMP = 1614556800
PAYLOAD = '{"id": "evt_1"}'


def _sign(payload: str, secret: str, timestamp: int | str) -> str:
    message = f"{timestamp}.{payload}".encode()
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


class TestParseSignatureHeader:
    def test_parses_timestamp_and_signature(self) -> None:
        parsed = parse_signature_header(f"t={TIMESTAMP},v1=abc")
        assert parsed.timestamp == TIMESTAMP
        assert parsed.signatures == ("abc",)

    def test_collects_all_v1_and_ignores_other_schemes(self) -> None:
        parsed = parse_signature_header(f"t={TIMESTAMP}, v1=aaa, v0=zzz, v1=bbb")
        assert parsed.signatures == ("aaa", "bbb")

    def test_keeps_raw_timestamp_text(self) -> None:
        parsed = parse_signature_header("t=01614556800,v1=abc")
        assert parsed.timestamp == TIMESTAMP
        assert parsed.raw_timestamp == "01614556800"

    def test_splits_on_first_equals_only(self) -> None:
        parsed = parse_signature_header(f"t={TIMESTAMP},v1=abc=")
        assert parsed.signatures == ("abc=",)

    @pytest.mark.parametrize(
        ("header", "reason"),
        [
            ("", "missing_signature_header"),
            ("garbage", "header_field_without_separator"),
            ("v1=abc", "missing_timestamp"),
            (f"t={TIMESTAMP}", "missing_v1_signature"),
            (f"t={TIMESTAMP},v0=abc", "missing_v1_signature"),
            ("t=yesterday,v1=abc", "invalid_timestamp"),
            ("t=+1614556800,v1=abc", "invalid_timestamp"),
            ("t=1_614_556_800,v1=abc", "invalid_timestamp"),
            ("t=\u0661\u0662\u0663,v1=abc", "invalid_timestamp"),
            ("t=,v1=abc", "invalid_timestamp"),
        ],
    )
    def test_malformed_headers(self, header: str, reason: str) -> None:
        with pytest.raises(MalformedHeaderError, match=reason):
            parse_signature_header(header)


class TestComputeSignature:
    def test_matches_hmac_sha256_of_timestamped_payload(self) -> None:
        assert compute_signature(PAYLOAD, SECRET, TIMESTAMP) == _sign(PAYLOAD, SECRET, TIMESTAMP)

    def test_bytes_and_str_payloads_agree(self) -> None:
        assert compute_signature(PAYLOAD.encode(), SECRET, TIMESTAMP) == compute_signature(
            PAYLOAD, SECRET, TIMESTAMP
        )

    def test_generate_test_header(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        assert header == f"t={TIMESTAMP},v1={_sign(PAYLOAD, SECRET, TIMESTAMP)}"


class TestSecureCompare:
    def test_equal_values(self) -> None:
        assert secure_compare("a" * 64, "a" * 64) is True

    def test_mismatch_in_last_byte(self) -> None:
        assert secure_compare("a" * 64, "a" * 63 + "b") is False

    def test_mismatch_in_first_byte(self) -> None:
        assert secure_compare("a" * 64, "b" + "a" * 63) is False

    def test_different_lengths(self) -> None:
        assert secure_compare("abc", "abcd") is False

    def test_uses_constant_time_primitive(self) -> None:
        with patch(
            "api.connectors.stripe.webhook.signature.hmac.compare_digest",
            return_value=False,
        ) as compare:
            assert secure_compare("abc", "abd") is False
        compare.assert_called_once_with(b"abc", b"abd")

    def test_verify_header_never_uses_plain_equality(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        with patch(
            "api.connectors.stripe.webhook.signature.secure_compare",
            wraps=secure_compare,
        ) as compare:
            verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP)
        compare.assert_called_once()


class TestVerifyHeader:
    def test_valid_signature(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        parsed = verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP + 10)
        assert parsed.timestamp == TIMESTAMP

    def test_exactly_300_seconds_is_accepted(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP + 300)

    def test_301_seconds_is_stale(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        with pytest.raises(StaleTimestampError) as exc_info:
            verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP + 301)
        assert exc_info.value.timestamp == TIMESTAMP
        assert exc_info.value.tolerance == 300

    def test_custom_tolerance(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        with pytest.raises(StaleTimestampError):
            verify_header(PAYLOAD, header, SECRET, tolerance=5, now=TIMESTAMP + 6)

    def test_future_timestamp_is_accepted(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP - 60)

    def test_wrong_secret(self) -> None:
        header = generate_test_header(PAYLOAD, "whsec_other", TIMESTAMP)
        with pytest.raises(InvalidSignatureError):
            verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP)

    def test_signature_bound_to_timestamp(self) -> None:
        signature = _sign(PAYLOAD, SECRET, TIMESTAMP)
        header = f"t={TIMESTAMP + 1},v1={signature}"
        with pytest.raises(InvalidSignatureError):
            verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP)

    def test_any_single_byte_change_invalidates(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        original = PAYLOAD.encode()
        for index in range(len(original)):
            tampered = bytearray(original)
            tampered[index] ^= 0x01
            with pytest.raises(InvalidSignatureError):
                verify_header(bytes(tampered), header, SECRET, now=TIMESTAMP)

    def test_signs_timestamp_text_as_received(self) -> None:
        signature = _sign(PAYLOAD, SECRET, "01614556800")
        header = f"t=01614556800,v1={signature}"
        parsed = verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP)
        assert parsed.timestamp == TIMESTAMP

    def test_accepts_any_matching_v1_during_rotation(self) -> None:
        good = _sign(PAYLOAD, SECRET, TIMESTAMP)
        header = f"t={TIMESTAMP},v1={'0' * 64},v1={good}"
        verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP)

    def test_bad_signature_checked_before_staleness(self) -> None:
        header = f"t={TIMESTAMP},v1={'0' * 64}"
        with pytest.raises(InvalidSignatureError):
            verify_header(PAYLOAD, header, SECRET, now=TIMESTAMP + 10_000)

    def test_security_errors_share_a_base(self) -> None:
        assert issubclass(InvalidSignatureError, WebhookVerificationError)
        assert issubclass(StaleTimestampError, WebhookVerificationError)
        assert not issubclass(MalformedHeaderError, WebhookVerificationError)

    def test_uses_wall_clock_by_default(self) -> None:
        header = generate_test_header(PAYLOAD, SECRET, TIMESTAMP)
        with patch(
            "api.connectors.stripe.webhook.signature.time.time",
            return_value=TIMESTAMP + 400,
        ), pytest.raises(StaleTimestampError):
            verify_header(PAYLOAD, header, SECRET)
