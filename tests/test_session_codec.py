from __future__ import annotations

import string
import time

import pytest

from api.core.security import SessionCodec, VerificationError

ALPHABET = string.ascii_letters + string.digits + "-_"


def test_round_trip_and_opaque_token():
    codec = SessionCodec("secret")
    token = codec.encode(1234)

    assert codec.decode(token) == 1234
    assert "1234" not in token
    assert set(token) <= set(ALPHABET)


def test_other_key_cannot_verify():
    token = SessionCodec("secret").encode(7)
    with pytest.raises(VerificationError):
        SessionCodec("another-secret").decode(token)


@pytest.mark.parametrize("token", [None, "", "not-a-token", "7", "!!!!", "é"])
def test_garbage_is_rejected(token):
    with pytest.raises(VerificationError):
        SessionCodec("secret").decode(token)


def test_every_single_character_change_is_rejected():
    codec = SessionCodec("secret")
    token = codec.encode(1)
    for index, char in enumerate(token):
        for replacement in ALPHABET:
            if replacement == char:
                continue
            tampered = token[:index] + replacement + token[index + 1 :]
            with pytest.raises(VerificationError):
                codec.decode(tampered)


def test_non_integer_payload_is_rejected():
    codec = SessionCodec("secret")
    forged = codec._fernet.encrypt(b"admin").decode("ascii").rstrip("=")
    with pytest.raises(VerificationError):
        codec.decode(forged)


def test_expired_token_is_rejected(monkeypatch):
    codec = SessionCodec("secret", ttl_seconds=60)
    token = codec.encode(5)
    assert codec.decode(token) == 5

    real_time = time.time
    monkeypatch.setattr(time, "time", lambda: real_time() + 3600)
    with pytest.raises(VerificationError):
        codec.decode(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        SessionCodec("")


def test_principal_lookup_requires_configured_codec():
    from types import SimpleNamespace

    from api.services.session_service import current_principal

    request = SimpleNamespace(
        app=SimpleNamespace(state=SimpleNamespace()),
        cookies={"user_id": "token"},
        method="GET",
        url=SimpleNamespace(path="/userinfo"),
    )
    with pytest.raises(RuntimeError, match="SessionCodec not configured"):
        current_principal(request)
