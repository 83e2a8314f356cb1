"""Token maker contract and factory.

Learn: Handlers and the auth gate only ever see ``TokenMaker``. Which
scheme is active (signed JWT or encrypted AEAD blob) is decided once in
``new_token_maker`` when the app is built, never per request.
"""

from abc import ABC, abstractmethod
from datetime import timedelta

from simplebank.token.errors import ConfigError
from simplebank.token.payload import Payload


class TokenMaker(ABC):
    """Issues and verifies bearer tokens with one symmetric key.

    Implementations hold only immutable key material, so one instance is
    safe to share across every concurrent request.
    """

    @abstractmethod
    def create_token_with_payload(
        self, username: str, duration: timedelta
    ) -> tuple[str, Payload]:
        """Create a token and return it together with its payload.

        Raises TokenSerializationError if the token cannot be built.
        """

    @abstractmethod
    def verify_token(self, token: str) -> Payload:
        """Verify a token and return its payload.

        Raises a TokenError subclass (malformed, bad signature, unsupported
        algorithm, expired) on failure.
        """

    def create_token(self, username: str, duration: timedelta) -> str:
        token, _ = self.create_token_with_payload(username, duration)
        return token


def new_token_maker(kind: str, symmetric_key: str) -> TokenMaker:
    """Build the maker selected by configuration."""
    from simplebank.token.aead_maker import AEADMaker
    from simplebank.token.jwt_maker import JWTMaker

    makers = {"jwt": JWTMaker, "aead": AEADMaker}
    try:
        maker_cls = makers[kind]
    except KeyError:
        raise ConfigError(
            f"unknown token maker {kind!r}; expected one of {sorted(makers)}"
        )
    return maker_cls(symmetric_key)
