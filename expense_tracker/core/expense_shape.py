"""Expense Shape — conversions between records, caller input and the wire view.

Invariants:
    - ExpenseInput carries only the mutable fields; id, owner and timestamps are absent by construction
    - replace_mutable_fields is a full replace: every mutable field is overwritten, notes included
    - ExpenseView never exposes the owner
    - next_updated_at never goes backwards, even if the wall clock does

Design Decisions:
    - Frozen dataclasses over Pydantic here: core stays free of transport concerns,
      schemas/expense.py maps these to the camelCase wire format
"""

from dataclasses import dataclass
from decimal import Decimal

from expense_tracker.core.domain_types import EpochMillis, ExpenseId
from expense_tracker.core.repository_protocols import ExpenseRecord


@dataclass(frozen=True)
class ExpenseInput:
    """Caller-supplied expense fields for create and full-replace update."""
    description: str
    amount: Decimal
    category: str
    expense_date: EpochMillis
    notes: str | None = None


@dataclass(frozen=True)
class ExpenseView:
    """Transport-agnostic representation returned by every expense operation."""
    id: ExpenseId
    description: str
    amount: Decimal
    category: str
    expense_date: EpochMillis
    notes: str | None
    created_at: EpochMillis
    updated_at: EpochMillis


def replace_mutable_fields(record: ExpenseRecord, data: ExpenseInput) -> None:
    record.description = data.description
    record.amount = data.amount
    record.category = data.category
    record.expense_date = data.expense_date
    record.notes = data.notes


def to_view(record: ExpenseRecord) -> ExpenseView:
    """Convert a persisted record to its view. Record must have been saved."""
    return ExpenseView(
        id=ExpenseId(record.id),
        description=record.description,
        amount=record.amount,
        category=record.category,
        expense_date=EpochMillis(record.expense_date),
        notes=record.notes,
        created_at=EpochMillis(record.created_at),
        updated_at=EpochMillis(record.updated_at),
    )


def next_updated_at(previous: int | None, now: int) -> EpochMillis:
    if previous is None:
        return EpochMillis(now)
    return EpochMillis(max(previous, now))
