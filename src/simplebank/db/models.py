"""Records held by the store.

Learn: Plain frozen dataclasses. The store swaps in a new record
(``dataclasses.replace``) on every change, so a record handed to a route
never changes underneath it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    username: str
    hashed_password: str
    full_name: str
    email: str
    password_changed_at: datetime = field(default_factory=utcnow)
    created_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Account:
    """A balance in one currency. ``owner`` is a username."""

    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Entry:
    """One side of a transfer; negative amount for the debit."""

    id: int
    account_id: int
    amount: int
    created_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Transfer:
    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class TransferResult:
    transfer: Transfer
    from_account: Account
    to_account: Account
    from_entry: Entry
    to_entry: Entry
