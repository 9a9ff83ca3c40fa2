"""Ownership Enforcement — load-then-check rules guarding every read, update and delete.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a Failure on violation, None on success
    - validate_access chains existence before ownership — first failure wins
    - An expense owned by someone else is never returned, only refused

Design Decisions:
    - Load-then-check over a filtered query: "never existed" and "exists but not yours"
      stay distinguishable internally even when the HTTP layer collapses them
    - Pure functions over service methods: testable without a database or mocks
"""

from expense_tracker.core.domain_types import (
    ExpenseId, OwnershipFailure, Principal,
)
from expense_tracker.core.outcome import Failure
from expense_tracker.core.repository_protocols import ExpenseRecord


def check_exists(
    record: ExpenseRecord | None, expense_id: ExpenseId,
) -> Failure | None:
    """Rule 1: the referenced expense must exist."""
    if record is None:
        return Failure(OwnershipFailure.NOT_FOUND, expense_id)
    return None


def check_owner(principal: Principal, record: ExpenseRecord) -> Failure | None:
    """Rule 2: the caller must be the expense's owner."""
    if record.owner_id != principal.user_id:
        return Failure(OwnershipFailure.UNAUTHORIZED, ExpenseId(record.id))
    return None


def validate_access(
    principal: Principal,
    record: ExpenseRecord | None,
    expense_id: ExpenseId,
) -> Failure | None:
    """Chain existence and ownership checks. Returns first failure or None."""
    return (
        check_exists(record, expense_id)
        or check_owner(principal, record)
    )
