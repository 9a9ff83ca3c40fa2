"""Expense ORM — persists a single financial entry bound to exactly one owner.

Invariants:
    - Always belongs to a User (owner_id FK, non-nullable)
    - owner_id is set once at creation; nothing in the codebase reassigns it
    - created_at/updated_at are epoch millis written by the expense store, never by callers
    - amount is a signed decimal, stored as given (no currency logic)

Design Decisions:
    - Numeric(12, 2) over Float: amounts round-trip exactly
    - expense_date as epoch millis: the client sends Date.now()-style instants
    - Composite indexes on (owner_id, expense_date) and (owner_id, category):
      the two owner-scoped queries the store issues
    - No ON DELETE CASCADE: user deletion is outside this service's scope
"""

from decimal import Decimal

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.db.base import Base


class Expense(Base):
    """Expense entity — one owner-scoped ledger entry."""
    __tablename__ = "expenses"
    __table_args__ = (
        Index("ix_expenses_owner_expense_date", "owner_id", "expense_date"),
        Index("ix_expenses_owner_category", "owner_id", "category"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    expense_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
