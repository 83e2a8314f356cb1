"""In-memory store for users, accounts, and transfers.

Learn: One lock guards every table, so a transfer's two balance updates
and two entries land together. The store lives on ``app.state`` and routes
reach it through the ``get_store`` dependency, which tests can swap out.
"""

import itertools
import threading
from dataclasses import replace

from fastapi import Request

from simplebank.db.models import Account, Entry, Transfer, TransferResult, User


class StoreError(Exception):
    """Base exception for store failures."""


class NotFoundError(StoreError):
    """Requested record does not exist."""


class ConflictError(StoreError):
    """Write violates a uniqueness or reference constraint."""


class Store:
    """Thread-safe in-memory tables."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._accounts: dict[int, Account] = {}
        self._entries: dict[int, Entry] = {}
        self._transfers: dict[int, Transfer] = {}
        self._account_ids = itertools.count(1)
        self._entry_ids = itertools.count(1)
        self._transfer_ids = itertools.count(1)

    # ─── Users ──────────────────────────────────────────

    def create_user(
        self, username: str, hashed_password: str, full_name: str, email: str
    ) -> User:
        with self._lock:
            if username in self._users:
                raise ConflictError(f"username {username!r} already exists")
            if any(u.email == email for u in self._users.values()):
                raise ConflictError(f"email {email!r} already registered")
            user = User(
                username=username,
                hashed_password=hashed_password,
                full_name=full_name,
                email=email,
            )
            self._users[username] = user
            return user

    def get_user(self, username: str) -> User:
        with self._lock:
            try:
                return self._users[username]
            except KeyError:
                raise NotFoundError(f"user {username!r} not found")

    # ─── Accounts ───────────────────────────────────────

    def create_account(self, owner: str, currency: str, balance: int = 0) -> Account:
        with self._lock:
            if owner not in self._users:
                raise ConflictError(f"owner {owner!r} does not exist")
            if any(
                a.owner == owner and a.currency == currency
                for a in self._accounts.values()
            ):
                raise ConflictError(
                    f"{owner!r} already has a {currency} account"
                )
            account = Account(
                id=next(self._account_ids),
                owner=owner,
                balance=balance,
                currency=currency,
            )
            self._accounts[account.id] = account
            return account

    def get_account(self, account_id: int) -> Account:
        with self._lock:
            try:
                return self._accounts[account_id]
            except KeyError:
                raise NotFoundError(f"account {account_id} not found")

    def list_accounts(self, owner: str, limit: int, offset: int) -> list[Account]:
        with self._lock:
            owned = sorted(
                (a for a in self._accounts.values() if a.owner == owner),
                key=lambda a: a.id,
            )
        return owned[offset:offset + limit]

    # ─── Transfers ──────────────────────────────────────

    def transfer(
        self, from_account_id: int, to_account_id: int, amount: int
    ) -> TransferResult:
        """Move ``amount`` between accounts and record the transfer.

        No balance or currency rules are applied here; callers validate.
        """
        with self._lock:
            try:
                source = self._accounts[from_account_id]
                dest = self._accounts[to_account_id]
            except KeyError as e:
                raise NotFoundError(f"account {e.args[0]} not found")

            transfer = Transfer(
                id=next(self._transfer_ids),
                from_account_id=from_account_id,
                to_account_id=to_account_id,
                amount=amount,
            )
            from_entry = Entry(
                id=next(self._entry_ids), account_id=from_account_id, amount=-amount
            )
            to_entry = Entry(
                id=next(self._entry_ids), account_id=to_account_id, amount=amount
            )

            source = replace(source, balance=source.balance - amount)
            self._accounts[source.id] = source
            # Re-read in case source and destination are the same account
            dest = replace(
                self._accounts[to_account_id],
                balance=self._accounts[to_account_id].balance + amount,
            )
            self._accounts[dest.id] = dest

            self._transfers[transfer.id] = transfer
            self._entries[from_entry.id] = from_entry
            self._entries[to_entry.id] = to_entry

            return TransferResult(
                transfer=transfer,
                from_account=self._accounts[from_account_id],
                to_account=dest,
                from_entry=from_entry,
                to_entry=to_entry,
            )


def get_store(request: Request) -> Store:
    """FastAPI dependency — the store attached to the app."""
    return request.app.state.store
