"""
Account repositories.

Two implementations of IAccountRepository:
- InMemoryAccountRepository: process-local dict, for tests and development
- SupabaseAccountRepository: durable storage in a Supabase table

Lookups are exact matches; usernames and emails are not case-folded.
"""

from typing import Optional

from shared.repository import BaseRepository
from .models import Account


class InMemoryAccountRepository:
    """Keeps accounts in a dict keyed by id. Not shared across processes."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def get_by_id(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def get_by_username(self, username: str) -> Optional[Account]:
        return next(
            (a for a in self._accounts.values() if a.username == username),
            None,
        )

    def get_by_email(self, email: str) -> Optional[Account]:
        return next(
            (a for a in self._accounts.values() if a.email == email),
            None,
        )

    def create(self, account: Account) -> Account:
        if account.id in self._accounts:
            raise ValueError(f"Account already exists: {account.id}")
        self._accounts[account.id] = account
        return account

    def update(self, account: Account) -> Account:
        self._accounts[account.id] = account
        return account


class SupabaseAccountRepository(BaseRepository[Account]):
    """
    Accounts in a Supabase table.

    Updates write the whole row back without a version check, so two
    concurrent logins can overwrite each other's counter changes.
    """

    model = Account

    def get_by_id(self, account_id: str) -> Optional[Account]:
        return self._lookup("id", account_id)

    def get_by_username(self, username: str) -> Optional[Account]:
        return self._lookup("username", username)

    def get_by_email(self, email: str) -> Optional[Account]:
        return self._lookup("email", email)

    def create(self, account: Account) -> Account:
        result = self._query().insert(self._to_row(account)).execute()
        return self._first(result) or account

    def update(self, account: Account) -> Account:
        result = self._query().update(self._to_row(account)).eq("id", account.id).execute()
        return self._first(result) or account

    def _lookup(self, column: str, value: str) -> Optional[Account]:
        return self._first(self._query().select("*").eq(column, value).limit(1).execute())
