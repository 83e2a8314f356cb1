"""Account API routes (protected).

Learn: This router is mounted behind ``require_auth``. New accounts are
always owned by the caller; reading a single account goes through the
ownership guard; listing is scoped to the caller's own accounts.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from simplebank.auth.dependencies import get_current_user
from simplebank.auth.ownership import ensure_owner
from simplebank.db.store import ConflictError, NotFoundError, Store, get_store
from simplebank.schemas.account import AccountCreate, AccountRead
from simplebank.token import Payload

router = APIRouter(prefix="/accounts")


@router.post("", response_model=AccountRead)
async def create_account(
    body: AccountCreate,
    payload: Payload = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    try:
        return store.create_account(owner=payload.username, currency=body.currency)
    except ConflictError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/{account_id}", response_model=AccountRead)
async def get_account(
    account_id: int = Path(..., ge=1),
    payload: Payload = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    try:
        account = store.get_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    ensure_owner(payload, account.owner)
    return account


@router.get("", response_model=list[AccountRead])
async def list_accounts(
    page_id: int = Query(..., ge=1),
    page_size: int = Query(..., ge=5, le=10),
    payload: Payload = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """List the caller's accounts, one page at a time."""
    return store.list_accounts(
        owner=payload.username,
        limit=page_size,
        offset=(page_id - 1) * page_size,
    )
