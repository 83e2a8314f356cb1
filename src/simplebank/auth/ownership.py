"""Ownership guard for resource handlers.

Learn: The gate only proves *who* is calling. Whether that caller may touch
a given account depends on the account, so handlers run this check after
loading the resource and before reading it out or changing it.

For transfers only the debited (source) account is guarded. Anyone may send
money to an account they don't own.
"""

from fastapi import HTTPException

from simplebank.token import Payload


def is_owner(payload: Payload, owner: str) -> bool:
    return payload.username == owner


def ensure_owner(payload: Payload, owner: str, resource: str = "account") -> None:
    """Raise 401 unless the authenticated caller owns the resource."""
    if not is_owner(payload, owner):
        raise HTTPException(
            status_code=401,
            detail=f"{resource} doesn't belong to the authenticated user",
        )
