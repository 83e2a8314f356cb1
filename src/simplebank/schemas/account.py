"""Pydantic schemas for accounts and transfers.

Learn: Currency is validated on input so an unsupported code is a 400
before any handler logic runs.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from simplebank.currency import SUPPORTED_CURRENCIES, is_supported_currency


def _check_currency(value: str) -> str:
    if not is_supported_currency(value):
        raise ValueError(f"currency must be one of {', '.join(SUPPORTED_CURRENCIES)}")
    return value


# ─── Accounts ───────────────────────────────────────────

class AccountCreate(BaseModel):
    currency: str

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, value: str) -> str:
        return _check_currency(value)


class AccountRead(BaseModel):
    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime

    model_config = {"from_attributes": True}


# ─── Transfers ──────────────────────────────────────────

class TransferCreate(BaseModel):
    from_account_id: int = Field(..., ge=1)
    to_account_id: int = Field(..., ge=1)
    amount: int = Field(..., gt=0)
    currency: str

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, value: str) -> str:
        return _check_currency(value)


class TransferRead(BaseModel):
    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime

    model_config = {"from_attributes": True}


class EntryRead(BaseModel):
    id: int
    account_id: int
    amount: int
    created_at: datetime

    model_config = {"from_attributes": True}


class TransferResultRead(BaseModel):
    transfer: TransferRead
    from_account: AccountRead
    to_account: AccountRead
    from_entry: EntryRead
    to_entry: EntryRead

    model_config = {"from_attributes": True}
