"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with SIMPLEBANK_ prefix,
optionally seeded from an ``app.env`` file in the working directory.

Learn: the token key is only checked for *presence* here. Its size is
enforced by the token maker itself when the app is built, so a weak key
stops the process before it serves a single request.
"""

from datetime import timedelta
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYMMETRIC_KEY = "change-me-in-production-32bytes!"


class Settings(BaseSettings):
    """All app configuration. Set via SIMPLEBANK_* env vars."""

    # Tokens
    token_symmetric_key: str = DEFAULT_SYMMETRIC_KEY
    token_maker: Literal["jwt", "aead"] = "aead"
    access_token_duration: timedelta = timedelta(minutes=15)

    # Passwords
    bcrypt_rounds: int = 12

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEBANK_",
        env_file="app.env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure the default token key is never used outside development."""
        if (
            self.environment != "development"
            and self.token_symmetric_key == DEFAULT_SYMMETRIC_KEY
        ):
            raise ValueError(
                "SIMPLEBANK_TOKEN_SYMMETRIC_KEY must be set to a secure value in "
                "non-development environments. Generate one with: "
                "simplebank gen-key"
            )
        return self


# Singleton — import this everywhere
settings = Settings()
