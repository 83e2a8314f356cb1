"""Transfer API route (protected).

Learn: Both accounts must exist and be in the transfer currency, but only
the source account is ownership-checked. Sending money to someone else's
account is the whole point; debiting it is not.
"""

from fastapi import APIRouter, Depends, HTTPException

from simplebank.auth.dependencies import get_current_user
from simplebank.auth.ownership import ensure_owner
from simplebank.db.models import Account
from simplebank.db.store import NotFoundError, Store, get_store
from simplebank.schemas.account import TransferCreate, TransferResultRead
from simplebank.token import Payload

router = APIRouter(prefix="/transfers")


def _valid_account(store: Store, account_id: int, currency: str) -> Account:
    try:
        account = store.get_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if account.currency != currency:
        raise HTTPException(
            status_code=400,
            detail=(
                f"account [{account_id}] currency mismatch: "
                f"{account.currency} vs {currency}"
            ),
        )
    return account


@router.post("", response_model=TransferResultRead)
async def create_transfer(
    body: TransferCreate,
    payload: Payload = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    source = _valid_account(store, body.from_account_id, body.currency)
    ensure_owner(payload, source.owner, resource="from account")

    _valid_account(store, body.to_account_id, body.currency)

    try:
        return store.transfer(
            from_account_id=body.from_account_id,
            to_account_id=body.to_account_id,
            amount=body.amount,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
