"""Token error taxonomy.

Verification failures share the ``TokenError`` base so the auth gate can
collapse them into one response, while ``reason`` keeps the specific kind
available for logs.
"""


class ConfigError(Exception):
    """Invalid token configuration. Fatal at startup."""


class KeyTooShortError(ConfigError):
    """Symmetric key does not meet the scheme's size requirement."""


class TokenSerializationError(Exception):
    """A token could not be built at issuance time."""


class TokenError(Exception):
    """Base exception for token verification failures."""

    reason = "invalid"


class TokenMalformedError(TokenError):
    """Token is structurally invalid or carries unreadable claims."""

    reason = "malformed"


class TokenSignatureError(TokenError):
    """Signature mismatch or failed decryption (tampered or wrong key)."""

    reason = "signature_invalid"


class UnsupportedAlgorithmError(TokenError):
    """Token header declares an algorithm outside the expected family."""

    reason = "unsupported_algorithm"


class TokenExpiredError(TokenError):
    """Token has expired."""

    reason = "expired"
