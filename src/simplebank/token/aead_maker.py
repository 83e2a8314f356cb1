"""Authenticated-encryption token maker (ChaCha20-Poly1305).

Token layout::

    v1.local.<base64url(nonce || ciphertext || tag)>

The ``v1.local.`` prefix is bound as associated data, so it cannot be
swapped without breaking the tag. A failed decryption is the only integrity
signal: wrong key and tampered token look the same.
"""

import base64
import binascii
import json
import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from simplebank.token.errors import (
    KeyTooShortError,
    TokenMalformedError,
    TokenSerializationError,
    TokenSignatureError,
)
from simplebank.token.maker import TokenMaker
from simplebank.token.payload import Payload

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
TOKEN_PREFIX = "v1.local."


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


class AEADMaker(TokenMaker):
    """Encrypted token maker; claims are hidden from intermediaries."""

    def __init__(self, symmetric_key: str):
        key = symmetric_key.encode("utf-8")
        if len(key) != KEY_SIZE:
            raise KeyTooShortError(
                f"invalid key size: must be exactly {KEY_SIZE} bytes"
            )
        self._aead = ChaCha20Poly1305(key)

    def create_token_with_payload(self, username, duration):
        payload = Payload.new(username, duration)
        try:
            plaintext = json.dumps(payload.to_claims()).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise TokenSerializationError(f"cannot encode token: {e}") from e

        nonce = secrets.token_bytes(NONCE_SIZE)
        sealed = self._aead.encrypt(nonce, plaintext, TOKEN_PREFIX.encode("ascii"))
        return TOKEN_PREFIX + _b64encode(nonce + sealed), payload

    def verify_token(self, token: str) -> Payload:
        if not token.startswith(TOKEN_PREFIX):
            raise TokenMalformedError("token has an unknown format")
        try:
            raw = _b64decode(token[len(TOKEN_PREFIX):])
        except (binascii.Error, ValueError) as e:
            raise TokenMalformedError("token body is not valid base64") from e
        if len(raw) < NONCE_SIZE + TAG_SIZE:
            raise TokenMalformedError("token body is too short")

        nonce, sealed = raw[:NONCE_SIZE], raw[NONCE_SIZE:]
        try:
            plaintext = self._aead.decrypt(
                nonce, sealed, TOKEN_PREFIX.encode("ascii")
            )
        except InvalidTag as e:
            raise TokenSignatureError("token cannot be decrypted") from e

        try:
            claims = json.loads(plaintext)
        except ValueError as e:
            raise TokenMalformedError("token claims are not valid JSON") from e

        payload = Payload.from_claims(claims)
        payload.valid()
        return payload
