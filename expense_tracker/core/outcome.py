"""Outcome — tagged success/failure values returned by ownership operations.

Invariants:
    - Every operation returns exactly one of Ok or Failure, never raises for a logical refusal
    - Failure always carries an OwnershipFailure kind; callers branch on isinstance

Design Decisions:
    - Return values over exceptions: NotFound and Unauthorized are expected outcomes,
      not exceptional control flow, and the caller is forced to look at both
    - Conversion to HTTP errors happens at the API edge (core/errors.py failure_to_error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from expense_tracker.core.domain_types import ExpenseId, OwnershipFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result wrapping the operation value."""
    value: T


@dataclass(frozen=True)
class Failure:
    """Refused operation. expense_id is set when a specific record was targeted."""
    kind: OwnershipFailure
    expense_id: ExpenseId | None = None


Outcome = Union[Ok[T], Failure]
