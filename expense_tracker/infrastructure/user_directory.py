"""User Directory — SQLAlchemy implementation of the UserDirectory protocol.

Invariants:
    - Email lookup is exact and case-sensitive (no lower-casing, no trimming)
    - add() is the only write path for users and is used by registration alone
    - A duplicate email surfaces as EmailAlreadyRegisteredError, even when two
      registrations race past the pre-check

Design Decisions:
    - Thin class over the request-scoped AsyncSession: the caller owns the session lifecycle
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.core.errors import EmailAlreadyRegisteredError
from expense_tracker.models.user import User


class SqlAlchemyUserDirectory:
    """Looks users up by email and registers them; satisfies UserDirectory and UserRegistry."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self._db.execute(
            select(User).where(User.email == email),
        )
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            raise EmailAlreadyRegisteredError()
        await self._db.refresh(user)
        return user
