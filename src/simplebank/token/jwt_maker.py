"""Signature-based token maker (HS256 JWT).

Learn: a JWT is ``header.payload.signature``. Anyone holding the token can
read the claims; the HMAC signature only makes tampering detectable.

The header's ``alg`` is attacker-controlled, so it is checked against the
HMAC family *before* the key is used. Otherwise a token declaring ``none``
(or an asymmetric algorithm) could steer the verifier onto the wrong path.
"""

import jwt

from simplebank.token.errors import (
    KeyTooShortError,
    TokenMalformedError,
    TokenSerializationError,
    TokenSignatureError,
    UnsupportedAlgorithmError,
)
from simplebank.token.maker import TokenMaker
from simplebank.token.payload import Payload

MIN_SECRET_KEY_SIZE = 32
SIGNING_ALGORITHM = "HS256"
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class JWTMaker(TokenMaker):
    """HS256 JSON Web Token maker."""

    def __init__(self, secret_key: str):
        key = secret_key.encode("utf-8")
        if len(key) < MIN_SECRET_KEY_SIZE:
            raise KeyTooShortError(
                f"invalid key size: must be at least {MIN_SECRET_KEY_SIZE} bytes"
            )
        self._key = key

    def create_token_with_payload(self, username, duration):
        payload = Payload.new(username, duration)
        claims = {
            **payload.to_claims(),
            "iat": int(payload.issued_at.timestamp()),
            "exp": int(payload.expired_at.timestamp()),
        }
        try:
            token = jwt.encode(claims, self._key, algorithm=SIGNING_ALGORITHM)
        except (TypeError, ValueError) as e:
            raise TokenSerializationError(f"cannot encode token: {e}") from e
        return token, payload

    def verify_token(self, token: str) -> Payload:
        try:
            header = jwt.get_unverified_header(token)
        except jwt.InvalidTokenError as e:
            raise TokenMalformedError(f"invalid token: {e}") from e

        alg = header.get("alg")
        if alg not in HMAC_ALGORITHMS:
            raise UnsupportedAlgorithmError(f"unsupported signing algorithm: {alg!r}")

        try:
            # Expiry is checked by Payload.valid() so there is one rule for
            # both makers; PyJWT's own exp/iat checks are disabled.
            claims = jwt.decode(
                token,
                self._key,
                algorithms=list(HMAC_ALGORITHMS),
                options={"verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError("token signature is invalid") from e
        except jwt.InvalidAlgorithmError as e:
            raise UnsupportedAlgorithmError(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise TokenMalformedError(f"invalid token: {e}") from e

        payload = Payload.from_claims(claims)
        payload.valid()
        return payload
