"""Configuration and startup tests.

Learn: A bad key must stop create_app() outright — there is no app object
to serve traffic with.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from simplebank.config import DEFAULT_SYMMETRIC_KEY, Settings
from simplebank.main import create_app
from simplebank.token import KeyTooShortError
from simplebank.token.aead_maker import AEADMaker
from simplebank.token.jwt_maker import JWTMaker


def test_defaults():
    s = Settings(_env_file=None)
    assert s.token_maker == "aead"
    assert s.access_token_duration == timedelta(minutes=15)
    assert len(s.token_symmetric_key.encode()) == 32


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SIMPLEBANK_TOKEN_MAKER", "jwt")
    monkeypatch.setenv("SIMPLEBANK_TOKEN_SYMMETRIC_KEY", "x" * 40)
    monkeypatch.setenv("SIMPLEBANK_ACCESS_TOKEN_DURATION", "PT30M")
    s = Settings(_env_file=None)
    assert s.token_maker == "jwt"
    assert s.token_symmetric_key == "x" * 40
    assert s.access_token_duration == timedelta(minutes=30)


def test_unknown_maker_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, token_maker="rsa")


def test_default_key_refused_outside_development():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, environment="production")


def test_custom_key_allowed_in_production():
    s = Settings(
        _env_file=None,
        environment="production",
        token_symmetric_key="p" * 32,
    )
    assert s.token_symmetric_key != DEFAULT_SYMMETRIC_KEY


@pytest.mark.parametrize(
    "maker, key",
    [("jwt", "k" * 16), ("jwt", "k" * 31), ("aead", "k" * 16), ("aead", "k" * 40)],
)
def test_create_app_refuses_bad_key(maker, key):
    s = Settings(_env_file=None, token_maker=maker, token_symmetric_key=key)
    with pytest.raises(KeyTooShortError):
        create_app(s)


@pytest.mark.parametrize("maker, cls", [("jwt", JWTMaker), ("aead", AEADMaker)])
def test_create_app_selects_maker(maker, cls):
    app = create_app(
        Settings(_env_file=None, token_maker=maker, token_symmetric_key="k" * 32)
    )
    assert isinstance(app.state.token_maker, cls)
