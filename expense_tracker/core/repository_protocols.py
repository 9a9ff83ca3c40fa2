"""Boundary Protocols — contracts between the ownership core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure/ or api/ — dependency arrows point inward only
    - All persistence accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM models satisfy the record shapes as-is
    - Async in Protocol: implementations do IO; the pure ownership checks that USE the
      records (core/enforce_ownership.py) are never async themselves
"""

from decimal import Decimal
from typing import Protocol

from expense_tracker.core.domain_types import ExpenseId, UserId


class UserRecord(Protocol):
    """Structural contract for a user as seen by the ownership core."""
    id: int
    email: str
    name: str | None
    created_at: int


class ExpenseRecord(Protocol):
    """Structural contract for a persisted (or about to be persisted) expense.

    id, created_at and updated_at are None until the store assigns them.
    """
    id: int | None
    owner_id: int
    description: str
    amount: Decimal
    category: str
    expense_date: int
    notes: str | None
    created_at: int | None
    updated_at: int | None


class UserDirectory(Protocol):
    """Contract for identity lookup — implemented by shell."""
    async def find_by_email(self, email: str) -> UserRecord | None: ...


class AccountRecord(UserRecord, Protocol):
    """A user together with the credential the auth service checks."""
    password_hash: str


class UserRegistry(Protocol):
    """Contract for account lookup and registration — implemented by shell."""
    async def find_by_email(self, email: str) -> AccountRecord | None: ...
    async def add(self, user: AccountRecord) -> AccountRecord: ...


class ExpenseStore(Protocol):
    """Contract for expense persistence — implemented by shell."""
    async def save(self, expense: ExpenseRecord) -> ExpenseRecord: ...
    async def find_by_id(self, expense_id: ExpenseId) -> ExpenseRecord | None: ...
    async def find_by_owner(self, user_id: UserId) -> list[ExpenseRecord]: ...
    async def find_by_owner_and_category(
        self, user_id: UserId, category: str,
    ) -> list[ExpenseRecord]: ...
    async def delete(self, expense: ExpenseRecord) -> None: ...
