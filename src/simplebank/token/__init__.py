"""Stateless bearer tokens.

Two interchangeable makers share one contract:
1. JWTMaker  → HS256 signed JWT (claims readable, tamper-evident)
2. AEADMaker → ChaCha20-Poly1305 encrypted blob (claims hidden)
"""

from simplebank.token.errors import (
    ConfigError,
    KeyTooShortError,
    TokenError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSerializationError,
    TokenSignatureError,
    UnsupportedAlgorithmError,
)
from simplebank.token.maker import TokenMaker, new_token_maker
from simplebank.token.payload import Payload

__all__ = [
    "ConfigError",
    "KeyTooShortError",
    "Payload",
    "TokenError",
    "TokenExpiredError",
    "TokenMaker",
    "TokenMalformedError",
    "TokenSerializationError",
    "TokenSignatureError",
    "UnsupportedAlgorithmError",
    "new_token_maker",
]
