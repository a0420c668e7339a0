"""Session cookie codec (signed and encrypted user id tokens)."""

from __future__ import annotations

import base64
import binascii
import hashlib

from cryptography.fernet import Fernet, InvalidToken

from api.domain.validation import parse_int


class VerificationError(Exception):
    """Raised when a session token cannot be trusted."""


def derive_key(secret: str | bytes) -> bytes:
    """Turn an arbitrary secret into a Fernet key (urlsafe base64 of 32 bytes)."""
    raw = secret.encode("utf-8") if isinstance(secret, str) else secret
    return base64.urlsafe_b64encode(hashlib.sha256(raw).digest())


def generate_secret() -> str:
    return Fernet.generate_key().decode("ascii")


class SessionCodec:
    """
    Encodes a user id into an opaque cookie value and verifies it back.

    Tokens are Fernet tokens (AES-CBC + HMAC-SHA256) without base64 padding, so
    they only contain cookie-safe characters. Decoding insists on the canonical
    base64 form: a token that decodes to the same bytes through a different
    spelling is rejected too.
    """

    def __init__(self, secret: str | bytes, *, ttl_seconds: int = 0) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        self._fernet = Fernet(derive_key(secret))
        self._ttl = ttl_seconds if ttl_seconds > 0 else None

    def encode(self, user_id: int) -> str:
        token = self._fernet.encrypt(str(int(user_id)).encode("ascii"))
        return token.decode("ascii").rstrip("=")

    def decode(self, token: str | None) -> int:
        if not token:
            raise VerificationError("missing token")
        raw = self._canonical_bytes(token)
        try:
            payload = self._fernet.decrypt(base64.urlsafe_b64encode(raw), ttl=self._ttl)
        except InvalidToken:
            raise VerificationError("signature mismatch") from None
        try:
            return parse_int(payload.decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            raise VerificationError("payload is not a user id") from None

    @staticmethod
    def _canonical_bytes(token: str) -> bytes:
        try:
            encoded = token.encode("ascii")
            raw = base64.urlsafe_b64decode(encoded + b"=" * (-len(encoded) % 4))
        except (UnicodeEncodeError, binascii.Error, ValueError):
            raise VerificationError("malformed token") from None
        if base64.urlsafe_b64encode(raw).rstrip(b"=") != encoded:
            raise VerificationError("malformed token")
        return raw
