"""Expense Routes — owner-scoped CRUD over /api/expenses.

Invariants:
    - Every route depends on get_current_principal; no expense route is anonymous
    - Routes never contain ownership logic: they unwrap service outcomes and map failures
    - Another user's expense answers exactly like a missing one unless
      EXPOSE_OWNERSHIP_DENIALS is set, in which case it answers 403

Design Decisions:
    - _unwrap is the single Failure -> exception point for this router
    - DELETE answers 200 with an empty body (existing clients expect 200, not 204)
"""

import logging
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, Path, Response, status

from expense_tracker.api.dependencies import (
    get_current_principal, get_expense_service,
)
from expense_tracker.config import Settings, get_settings
from expense_tracker.core.domain_types import ExpenseId, Principal
from expense_tracker.core.errors import failure_to_error
from expense_tracker.core.outcome import Failure, Outcome
from expense_tracker.schemas.expense import ExpenseRequest, ExpenseResponse
from expense_tracker.services.expense_service import ExpenseOwnershipService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/expenses", tags=["expenses"])

T = TypeVar("T")

# Matches the Integer primary key of the expenses table
MAX_EXPENSE_ID = 2**31 - 1
ExpenseIdParam = Annotated[int, Path(ge=1, le=MAX_EXPENSE_ID)]


def _unwrap(outcome: Outcome[T], settings: Settings) -> T:
    if isinstance(outcome, Failure):
        raise failure_to_error(outcome, settings.expose_ownership_denials)
    return outcome.value


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    """All of the caller's expenses, most recent expense date first."""
    views = _unwrap(await service.list_all(principal), settings)
    return [ExpenseResponse.from_view(v) for v in views]


@router.post("", response_model=ExpenseResponse)
async def create_expense(
    body: ExpenseRequest,
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    view = _unwrap(await service.create(principal, body.to_input()), settings)
    return ExpenseResponse.from_view(view)


@router.get("/category/{category}", response_model=list[ExpenseResponse])
async def list_expenses_by_category(
    category: str,
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    """Caller's expenses whose category matches exactly (case-sensitive)."""
    views = _unwrap(
        await service.list_by_category(principal, category), settings,
    )
    return [ExpenseResponse.from_view(v) for v in views]


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: ExpenseIdParam,
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    view = _unwrap(
        await service.get(principal, ExpenseId(expense_id)), settings,
    )
    return ExpenseResponse.from_view(view)


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: ExpenseIdParam,
    body: ExpenseRequest,
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    """Full replace of description, amount, category, expenseDate and notes."""
    view = _unwrap(
        await service.update(principal, ExpenseId(expense_id), body.to_input()),
        settings,
    )
    return ExpenseResponse.from_view(view)


@router.delete("/{expense_id}", status_code=status.HTTP_200_OK)
async def delete_expense(
    expense_id: ExpenseIdParam,
    principal: Principal = Depends(get_current_principal),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
):
    _unwrap(await service.delete(principal, ExpenseId(expense_id)), settings)
    return Response(status_code=status.HTTP_200_OK)
