"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ExpenseId wrap store-assigned integers — never reuse one for the other
    - EpochMillis is a UTC instant in milliseconds (client sends Date.now())
    - Principal is immutable once resolved; core code never re-reads identity from ambient state
    - All failure kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ExpenseId = NewType("ExpenseId", int)


# ─── Value Types ─────────────────────────────────────────────────

EpochMillis = NewType("EpochMillis", int)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, resolved once at the transport boundary."""
    user_id: UserId
    email: str


# ─── Enums ───────────────────────────────────────────────────────

class OwnershipFailure(str, Enum):
    """Why an expense operation was refused. Terminal, never retried."""
    IDENTITY_NOT_FOUND = "identity_not_found"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
