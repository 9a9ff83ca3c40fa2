"""Expense Schemas — Pydantic models for the expense wire format.

Invariants:
    - Wire names are camelCase (expenseDate, createdAt, updatedAt); snake_case also accepted on input
    - ExpenseRequest has no id, owner or timestamp fields; unknown keys are ignored,
      so a client-supplied owner can never reach the service
    - ExpenseResponse never carries the owner

Design Decisions:
    - amount is Decimal on input and float on output (JSON number, as clients expect)
    - amount is rounded half-up to cents rather than rejected: browser clients send
      computed floats such as 0.1 + 0.2, and the column is Numeric(12, 2)
    - Integer bounds mirror the columns (BigInteger expense_date), so out-of-range
      values fail validation instead of overflowing the driver
    - to_input()/from_view() are the only bridges to core/expense_shape.py
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from expense_tracker.core.domain_types import EpochMillis
from expense_tracker.core.expense_shape import ExpenseInput, ExpenseView

CENT = Decimal("0.01")
# Largest magnitude a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")
MIN_BIGINT = -(2**63)
MAX_BIGINT = 2**63 - 1


class ExpenseRequest(BaseModel):
    """Create/update body: full set of mutable expense fields."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    description: str = Field(max_length=10_000)
    amount: Decimal = Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    category: str = Field(min_length=1, max_length=100)
    expense_date: int = Field(ge=MIN_BIGINT, le=MAX_BIGINT)
    notes: str | None = Field(None, max_length=10_000)

    @field_validator("amount")
    @classmethod
    def round_to_cents(cls, v: Decimal) -> Decimal:
        return v.quantize(CENT, rounding=ROUND_HALF_UP)

    def to_input(self) -> ExpenseInput:
        return ExpenseInput(
            description=self.description,
            amount=self.amount,
            category=self.category,
            expense_date=EpochMillis(self.expense_date),
            notes=self.notes,
        )


class ExpenseResponse(BaseModel):
    """Expense as returned to clients."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    description: str
    amount: float
    category: str
    expense_date: int
    notes: str | None = None
    created_at: int
    updated_at: int

    @classmethod
    def from_view(cls, view: ExpenseView) -> "ExpenseResponse":
        return cls(
            id=view.id,
            description=view.description,
            amount=float(view.amount),
            category=view.category,
            expense_date=view.expense_date,
            notes=view.notes,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )
