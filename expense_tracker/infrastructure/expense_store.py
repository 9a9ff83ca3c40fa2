"""Expense Store — SQLAlchemy implementation of the ExpenseStore protocol.

Invariants:
    - save() on a record without id inserts it and sets created_at == updated_at
    - save() on an existing record refreshes updated_at, never moving it backwards
    - Every write commits immediately; no transaction spans two store calls
    - Owner-scoped reads are ordered by expense_date descending, id descending as tie-break

Design Decisions:
    - Timestamps assigned here rather than by column defaults: the store is the only
      writer of created_at/updated_at, callers cannot set them through ExpenseInput
    - No row locking: load-check-act in the ownership service is intentionally not atomic
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.core.domain_types import ExpenseId, UserId
from expense_tracker.core.expense_shape import next_updated_at
from expense_tracker.db.base import now_millis
from expense_tracker.models.expense import Expense


class SqlAlchemyExpenseStore:
    """Keyed and owner-scoped expense persistence over a request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, expense: Expense) -> Expense:
        now = now_millis()
        if expense.id is None:
            expense.created_at = now
            expense.updated_at = now
            self._db.add(expense)
        else:
            expense.updated_at = next_updated_at(expense.updated_at, now)
        await self._db.commit()
        await self._db.refresh(expense)
        return expense

    async def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        return await self._db.get(Expense, expense_id)

    async def find_by_owner(self, user_id: UserId) -> list[Expense]:
        result = await self._db.execute(
            select(Expense)
            .where(Expense.owner_id == user_id)
            .order_by(Expense.expense_date.desc(), Expense.id.desc()),
        )
        return list(result.scalars().all())

    async def find_by_owner_and_category(
        self, user_id: UserId, category: str,
    ) -> list[Expense]:
        result = await self._db.execute(
            select(Expense)
            .where(Expense.owner_id == user_id, Expense.category == category)
            .order_by(Expense.expense_date.desc(), Expense.id.desc()),
        )
        return list(result.scalars().all())

    async def delete(self, expense: Expense) -> None:
        await self._db.delete(expense)
        await self._db.commit()
