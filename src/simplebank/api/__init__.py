"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Auth is applied at the include_router level using FastAPI's
dependencies parameter. Every route in a protected router passes through
require_auth before its handler runs. Health and user routes are open.
"""

from fastapi import APIRouter, Depends

from simplebank.api.accounts import router as accounts_router
from simplebank.api.health import router as health_router
from simplebank.api.transfers import router as transfers_router
from simplebank.api.users import router as users_router
from simplebank.auth.dependencies import require_auth

# All protected routers require a valid bearer token
_auth = [Depends(require_auth)]

api_router = APIRouter()

# Open routes — no auth required
api_router.include_router(health_router, tags=["health"])
api_router.include_router(users_router, tags=["users"])

# Protected routes
api_router.include_router(accounts_router, tags=["accounts"], dependencies=_auth)
api_router.include_router(transfers_router, tags=["transfers"], dependencies=_auth)
