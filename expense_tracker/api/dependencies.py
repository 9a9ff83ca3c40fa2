"""Request Dependencies — per-request wiring of sessions, services and the caller's Principal.

Invariants:
    - The Principal is resolved once per request: token -> email -> user -> Principal
    - Routes receive identity only as an explicit parameter, never from global state
    - Every credential problem (missing, malformed, expired, unknown user) answers 401

Design Decisions:
    - OAuth2PasswordBearer(auto_error=False): missing tokens raise AuthenticationError
      so they share the structured error envelope instead of FastAPI's default body
    - FastAPI caches get_db per request: the principal lookup and the operation share one session
"""

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.config import Settings, get_settings
from expense_tracker.core.domain_types import Principal
from expense_tracker.core.errors import AuthenticationError, failure_to_error
from expense_tracker.core.outcome import Failure
from expense_tracker.infrastructure.credentials import decode_access_token
from expense_tracker.infrastructure.database import get_db
from expense_tracker.infrastructure.expense_store import SqlAlchemyExpenseStore
from expense_tracker.infrastructure.user_directory import SqlAlchemyUserDirectory
from expense_tracker.services.auth_service import AuthService
from expense_tracker.services.expense_service import ExpenseOwnershipService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_expense_service(
    db: AsyncSession = Depends(get_db),
) -> ExpenseOwnershipService:
    return ExpenseOwnershipService(
        SqlAlchemyUserDirectory(db), SqlAlchemyExpenseStore(db),
    )


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(SqlAlchemyUserDirectory(db), settings)


async def get_current_principal(
    token: str | None = Depends(oauth2_scheme),
    service: ExpenseOwnershipService = Depends(get_expense_service),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Resolve the bearer token into the caller's Principal."""
    if not token:
        raise AuthenticationError("Not authenticated")
    email = decode_access_token(token, settings)
    outcome = await service.resolve(email)
    if isinstance(outcome, Failure):
        raise failure_to_error(outcome)
    return outcome.value
