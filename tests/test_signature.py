"""Tests for webhook signature verification."""

import hashlib
import hmac

import pytest

from notifica.exceptions import NotificaError
from notifica.webhooks import (
    SIGNATURE_HEADER,
    compute_signature,
    timing_safe_equal,
    verify_signature,
    verify_signature_or_raise,
)

SECRET = "whsec_test_secret"
PAYLOAD = '{"event":"notification.delivered","data":{"id":"ntf_1"}}'


def _sign(payload: str, secret: str = SECRET) -> str:
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


class TestComputeSignature:
    """Tests for signature computation."""

    def test_matches_hmac_sha256(self):
        assert compute_signature(PAYLOAD, SECRET) == _sign(PAYLOAD)

    def test_lowercase_hex(self):
        signature = compute_signature(PAYLOAD, SECRET)
        assert len(signature) == 64
        assert signature == signature.lower()

    def test_bytes_and_str_agree(self):
        assert compute_signature(PAYLOAD.encode(), SECRET) == compute_signature(PAYLOAD, SECRET)

    def test_header_name(self):
        assert SIGNATURE_HEADER == "X-Notifica-Signature"


class TestVerifySignature:
    """Tests for signature verification."""

    def test_valid_signature(self):
        assert verify_signature(PAYLOAD, _sign(PAYLOAD), SECRET) is True

    def test_valid_signature_over_bytes(self):
        assert verify_signature(PAYLOAD.encode(), _sign(PAYLOAD), SECRET) is True
        assert verify_signature(bytearray(PAYLOAD.encode()), _sign(PAYLOAD), SECRET) is True

    def test_non_ascii_payload(self):
        payload = '{"name":"João"}'
        assert verify_signature(payload, _sign(payload), SECRET) is True

    def test_wrong_secret(self):
        assert verify_signature(PAYLOAD, _sign(PAYLOAD, "other"), SECRET) is False

    def test_tampered_payload(self):
        tampered = PAYLOAD.replace("ntf_1", "ntf_2")
        assert verify_signature(tampered, _sign(PAYLOAD), SECRET) is False

    def test_any_single_character_change_rejected(self):
        signature = _sign(PAYLOAD)
        for index in range(len(signature)):
            replacement = "0" if signature[index] != "0" else "1"
            mutated = signature[:index] + replacement + signature[index + 1 :]
            assert verify_signature(PAYLOAD, mutated, SECRET) is False

    def test_uppercase_signature_rejected(self):
        assert verify_signature(PAYLOAD, _sign(PAYLOAD).upper(), SECRET) is False

    def test_truncated_signature_rejected(self):
        assert verify_signature(PAYLOAD, _sign(PAYLOAD)[:-1], SECRET) is False

    @pytest.mark.parametrize(
        ("payload", "signature", "secret"),
        [
            ("", "abc", SECRET),
            (PAYLOAD, "", SECRET),
            (PAYLOAD, "abc", ""),
            (b"", "abc", SECRET),
        ],
    )
    def test_empty_inputs(self, payload, signature, secret):
        assert verify_signature(payload, signature, secret) is False

    def test_garbage_never_raises(self):
        assert verify_signature(PAYLOAD, "not-hex-é", SECRET) is False
        assert verify_signature(PAYLOAD, 123, SECRET) is False  # type: ignore[arg-type]


class TestVerifySignatureOrRaise:
    """Tests for the raising variant."""

    def test_valid_signature_passes(self):
        verify_signature_or_raise(PAYLOAD, _sign(PAYLOAD), SECRET)

    def test_invalid_signature_raises(self):
        with pytest.raises(NotificaError, match="Invalid webhook signature"):
            verify_signature_or_raise(PAYLOAD, "0" * 64, SECRET)


class TestTimingSafeEqual:
    """Tests for the constant-time comparator."""

    def test_equal(self):
        assert timing_safe_equal("abc123", "abc123") is True

    def test_empty_strings_equal(self):
        assert timing_safe_equal("", "") is True

    def test_different_lengths(self):
        assert timing_safe_equal("abc", "abcd") is False

    def test_differs_at_first_position(self):
        assert timing_safe_equal("xbc", "abc") is False

    def test_differs_at_last_position(self):
        assert timing_safe_equal("abx", "abc") is False
