"""FastAPI application factory.

Learn: create_app() builds the token maker *before* anything else. An
undersized key raises KeyTooShortError right here, so a misconfigured
process never gets as far as accepting traffic.

The maker, settings, and store hang off ``app.state`` and are shared
read-only by every request.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from simplebank import __version__
from simplebank.api import api_router
from simplebank.api.errors import register_error_handlers
from simplebank.config import Settings, settings as default_settings
from simplebank.db.store import Store
from simplebank.token import new_token_maker

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info(
        "simplebank.starting",
        version=__version__,
        environment=app.state.settings.environment,
        token_maker=app.state.settings.token_maker,
    )
    yield
    logger.info("simplebank.shutdown")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[Store] = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or default_settings
    token_maker = new_token_maker(settings.token_maker, settings.token_symmetric_key)

    app = FastAPI(
        title="SimpleBank",
        description="Accounts and transfers behind stateless bearer tokens",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.token_maker = token_maker
    app.state.store = store or Store()

    # ── Middleware stack ──────────────────────────────────────
    # Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → Security → handler

    from simplebank.middleware.request_id import RequestIdMiddleware
    from simplebank.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    register_error_handlers(app)
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: simplebank.main:app)
app = create_app()
