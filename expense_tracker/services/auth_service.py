"""Auth Service — registration and login, the account plumbing around the ownership core.

Invariants:
    - Registration never overwrites an existing account (409 on duplicate email)
    - Login gives the same error for unknown email and wrong password
    - Tokens are minted only after the password check passes

Design Decisions:
    - Returns (user, token) tuples: routes shape the response, the service stays schema-free
    - Principal resolution for expense routes lives in ExpenseOwnershipService.resolve,
      not here: this service issues credentials, it does not scope data
"""

import logging

from expense_tracker.config import Settings
from expense_tracker.core.domain_types import Principal
from expense_tracker.core.errors import (
    AuthenticationError, EmailAlreadyRegisteredError, IdentityNotFoundError,
)
from expense_tracker.core.repository_protocols import AccountRecord, UserRegistry
from expense_tracker.infrastructure.credentials import (
    create_access_token, hash_password, verify_password,
)
from expense_tracker.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    """Issues credentials for new and returning users."""

    def __init__(self, users: UserRegistry, settings: Settings):
        self._users = users
        self._settings = settings

    async def register(
        self, email: str, password: str, name: str | None = None,
    ) -> tuple[AccountRecord, str]:
        if await self._users.find_by_email(email) is not None:
            raise EmailAlreadyRegisteredError()
        user = await self._users.add(User(
            email=email, name=name, password_hash=hash_password(password),
        ))
        logger.info("User registered", extra={"user_id": user.id})
        return user, create_access_token(user.email, self._settings)

    async def login(self, email: str, password: str) -> tuple[AccountRecord, str]:
        user = await self._users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user, create_access_token(user.email, self._settings)

    async def profile(self, principal: Principal) -> AccountRecord:
        user = await self._users.find_by_email(principal.email)
        if user is None:
            raise IdentityNotFoundError()
        return user
