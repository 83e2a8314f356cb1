"""Test fixtures — a fresh app, store, and token maker per test.

Learn: The ``settings`` fixture is parametrized over both token makers, so
every API test runs once with signed JWTs and once with encrypted tokens.
Handlers and the auth gate only see the TokenMaker contract, and these
tests prove that nothing depends on which variant is active.

Random names come from ``random`` — fine for test data, never for tokens.
"""

import random
import string
from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from simplebank.auth.password import hash_password
from simplebank.config import Settings
from simplebank.db.store import Store
from simplebank.main import create_app

JWT_TEST_KEY = "jwt-test-key-0123456789abcdefghijklmnop"
AEAD_TEST_KEY = "aead-test-key-0123456789abcdefgh"
TEST_PASSWORD = "secret123"


def random_string(n: int = 6) -> str:
    return "".join(random.choice(string.ascii_lowercase) for _ in range(n))


@pytest.fixture(params=["jwt", "aead"])
def settings(request):
    key = JWT_TEST_KEY if request.param == "jwt" else AEAD_TEST_KEY
    return Settings(
        _env_file=None,
        token_maker=request.param,
        token_symmetric_key=key,
        access_token_duration=timedelta(minutes=1),
        bcrypt_rounds=4,
    )


@pytest.fixture()
def store():
    return Store()


@pytest.fixture()
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture()
def token_maker(app):
    return app.state.token_maker


@pytest_asyncio.fixture()
async def client(app):
    """HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
def auth_headers(token_maker):
    """Build an authorization header for ``username``.

    Mirrors what a real client sends: ``<auth_type> <token>``. An empty
    auth_type leaves just the token, i.e. a one-field header.
    """

    def _headers(
        username: str,
        duration: timedelta = timedelta(minutes=1),
        auth_type: str = "Bearer",
    ) -> dict:
        token = token_maker.create_token(username, duration)
        return {"authorization": f"{auth_type} {token}".strip()}

    return _headers


@pytest.fixture()
def make_user(store):
    """Create a user directly in the store (password: TEST_PASSWORD)."""

    def _make(username: str = None):
        username = username or random_string()
        return store.create_user(
            username=username,
            hashed_password=hash_password(TEST_PASSWORD, rounds=4),
            full_name=username.title(),
            email=f"{username}@example.com",
        )

    return _make


@pytest.fixture()
def user_password():
    """Plain-text password of every user built by ``make_user``."""
    return TEST_PASSWORD
