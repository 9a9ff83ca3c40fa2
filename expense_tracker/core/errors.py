"""Error Hierarchy — typed, categorized exceptions for all expense tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages (never another user's email or id)

Design Decisions:
    - Single hierarchy with ExpenseTrackerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Core ownership checks return Failure values; failure_to_error is the one place
      they turn into exceptions, at the API edge
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from expense_tracker.core.domain_types import OwnershipFailure
from expense_tracker.core.outcome import Failure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    expense_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(ExpenseTrackerError):
    """Missing, malformed or expired credentials."""
    def __init__(
        self, message: str = "Could not validate credentials",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class IdentityNotFoundError(ExpenseTrackerError):
    """Authenticated identity does not correspond to any known user."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authenticated identity does not match any user",
            "IDENTITY_NOT_FOUND", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class EmailAlreadyRegisteredError(ExpenseTrackerError):
    """Registration attempted with an email that already has an account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email already registered",
            "EMAIL_ALREADY_REGISTERED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class ExpenseNotFoundError(ExpenseTrackerError):
    """Requested expense does not exist (or is reported as such)."""
    def __init__(self, expense_id: int | None, context: ErrorContext | None = None):
        super().__init__(
            f"Expense '{expense_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.expense_id = expense_id


class ExpenseAccessDeniedError(ExpenseTrackerError):
    """Expense exists but belongs to another user."""
    def __init__(self, expense_id: int | None, context: ErrorContext | None = None):
        super().__init__(
            f"Not allowed to access expense '{expense_id}'",
            "EXPENSE_ACCESS_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.expense_id = expense_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ExpenseTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Failure → Error mapping ────────────────────────────────────

def failure_to_error(
    failure: Failure, expose_ownership_denials: bool = False,
) -> ExpenseTrackerError:
    """Map a core Failure to the exception the HTTP layer raises.

    With expose_ownership_denials off, UNAUTHORIZED is indistinguishable from
    NOT_FOUND on the wire: same status, code and message.
    """
    context = ErrorContext(expense_id=failure.expense_id)
    if failure.kind is OwnershipFailure.IDENTITY_NOT_FOUND:
        return IdentityNotFoundError(context)
    if failure.kind is OwnershipFailure.UNAUTHORIZED and expose_ownership_denials:
        return ExpenseAccessDeniedError(failure.expense_id, context)
    return ExpenseNotFoundError(failure.expense_id, context)
