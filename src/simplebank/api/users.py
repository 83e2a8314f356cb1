"""User API — registration and login.

Learn: Routes for account holders:
- POST /users → create a user (password stored as a bcrypt hash)
- POST /users/login → username/password → access token

Login is the only place tokens are issued. The lifetime comes from
``settings.access_token_duration``.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from simplebank.auth.dependencies import get_token_maker
from simplebank.auth.password import hash_password, verify_password
from simplebank.db.store import ConflictError, NotFoundError, Store, get_store
from simplebank.schemas.user import LoginRequest, LoginResponse, UserCreate, UserRead
from simplebank.token import TokenMaker, TokenSerializationError

logger = structlog.get_logger()

router = APIRouter(prefix="/users")


@router.post("", response_model=UserRead)
async def create_user(
    body: UserCreate,
    request: Request,
    store: Store = Depends(get_store),
):
    """Create a new user."""
    settings = request.app.state.settings
    hashed = hash_password(body.password, rounds=settings.bcrypt_rounds)
    try:
        user = store.create_user(
            username=body.username,
            hashed_password=hashed,
            full_name=body.full_name,
            email=body.email,
        )
    except ConflictError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return user


@router.post("/login", response_model=LoginResponse)
async def login_user(
    body: LoginRequest,
    request: Request,
    store: Store = Depends(get_store),
    maker: TokenMaker = Depends(get_token_maker),
):
    """Login with username and password → access token."""
    try:
        user = store.get_user(body.username)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="invalid credentials")

    settings = request.app.state.settings
    try:
        token, payload = maker.create_token_with_payload(
            user.username, settings.access_token_duration
        )
    except TokenSerializationError as e:
        logger.error("auth.token_issue_failed", username=user.username, error=str(e))
        raise HTTPException(status_code=500, detail="cannot create access token")

    return LoginResponse(
        access_token=token,
        access_token_expires_at=payload.expired_at,
        user=UserRead.model_validate(user),
    )
