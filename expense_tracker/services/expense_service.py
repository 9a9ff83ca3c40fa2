"""Expense Ownership Service — binds every expense to one owner and enforces it on each operation.

Invariants:
    - Every operation takes an explicit, already-resolved Principal (never ambient state)
    - get/update/delete: load by id -> NOT_FOUND if absent -> UNAUTHORIZED if owner differs -> act
    - A refused update persists nothing; a refused delete never calls store.delete
    - owner_id is written exactly once, in create; update touches mutable fields only
    - Returns Ok/Failure outcomes; logical refusals are never raised

Design Decisions:
    - resolve() is the single identity -> principal lookup; the HTTP layer calls it once
      per request and passes the Principal into every operation
    - Load-check-act is not atomic: a concurrent update/delete by the same owner can
      interleave (lost update, update-after-delete). Accepted; no locking here.
    - Denials are logged at WARNING with the caller's id only, never the real owner's
"""

import logging

from expense_tracker.core.domain_types import (
    ExpenseId, OwnershipFailure, Principal, UserId,
)
from expense_tracker.core.enforce_ownership import validate_access
from expense_tracker.core.expense_shape import (
    ExpenseInput, ExpenseView, replace_mutable_fields, to_view,
)
from expense_tracker.core.outcome import Failure, Ok, Outcome
from expense_tracker.core.repository_protocols import (
    ExpenseRecord, ExpenseStore, UserDirectory,
)
from expense_tracker.models.expense import Expense

logger = logging.getLogger(__name__)


class ExpenseOwnershipService:
    """Owner-scoped CRUD over the expense store."""

    def __init__(self, users: UserDirectory, expenses: ExpenseStore):
        self._users = users
        self._expenses = expenses

    async def resolve(self, email: str) -> Outcome[Principal]:
        """Turn an authenticated identity string into a Principal."""
        user = await self._users.find_by_email(email)
        if user is None:
            logger.warning(
                "Identity does not match any user",
                extra={"failure": OwnershipFailure.IDENTITY_NOT_FOUND.value},
            )
            return Failure(OwnershipFailure.IDENTITY_NOT_FOUND)
        return Ok(Principal(user_id=UserId(user.id), email=user.email))

    async def create(
        self, principal: Principal, data: ExpenseInput,
    ) -> Outcome[ExpenseView]:
        expense = Expense(owner_id=principal.user_id)
        replace_mutable_fields(expense, data)
        saved = await self._expenses.save(expense)
        logger.info(
            "Expense created",
            extra={"user_id": principal.user_id, "expense_id": saved.id},
        )
        return Ok(to_view(saved))

    async def list_all(self, principal: Principal) -> Outcome[list[ExpenseView]]:
        """All of the principal's expenses, most recent expense_date first."""
        records = await self._expenses.find_by_owner(principal.user_id)
        return Ok([to_view(r) for r in records])

    async def list_by_category(
        self, principal: Principal, category: str,
    ) -> Outcome[list[ExpenseView]]:
        """Exact, case-sensitive category match within the principal's expenses."""
        records = await self._expenses.find_by_owner_and_category(
            principal.user_id, category,
        )
        return Ok([to_view(r) for r in records])

    async def get(
        self, principal: Principal, expense_id: ExpenseId,
    ) -> Outcome[ExpenseView]:
        outcome = await self._load_owned(principal, expense_id)
        if isinstance(outcome, Failure):
            return outcome
        return Ok(to_view(outcome.value))

    async def update(
        self, principal: Principal, expense_id: ExpenseId, data: ExpenseInput,
    ) -> Outcome[ExpenseView]:
        """Full replace of the mutable fields. id, owner and created_at never change."""
        outcome = await self._load_owned(principal, expense_id)
        if isinstance(outcome, Failure):
            return outcome
        expense = outcome.value
        replace_mutable_fields(expense, data)
        saved = await self._expenses.save(expense)
        logger.info(
            "Expense updated",
            extra={"user_id": principal.user_id, "expense_id": expense_id},
        )
        return Ok(to_view(saved))

    async def delete(
        self, principal: Principal, expense_id: ExpenseId,
    ) -> Outcome[None]:
        outcome = await self._load_owned(principal, expense_id)
        if isinstance(outcome, Failure):
            return outcome
        await self._expenses.delete(outcome.value)
        logger.info(
            "Expense deleted",
            extra={"user_id": principal.user_id, "expense_id": expense_id},
        )
        return Ok(None)

    async def _load_owned(
        self, principal: Principal, expense_id: ExpenseId,
    ) -> Outcome[ExpenseRecord]:
        """Load-then-check. The only path by which get/update/delete reach a record."""
        record = await self._expenses.find_by_id(expense_id)
        failure = validate_access(principal, record, expense_id)
        if failure is not None:
            log = (
                logger.warning
                if failure.kind is OwnershipFailure.UNAUTHORIZED
                else logger.info
            )
            log(
                f"Expense access refused: {failure.kind.value}",
                extra={
                    "user_id": principal.user_id,
                    "expense_id": expense_id,
                    "failure": failure.kind.value,
                },
            )
            return failure
        return Ok(record)
