"""User ORM — identity anchor every expense is bound to.

Invariants:
    - id is an autoincrement integer primary key, stable for the user's lifetime
    - email is unique and stored exactly as registered (case-sensitive lookups)
    - password_hash is written only by the auth service, never serialized

Design Decisions:
    - created_at as epoch millis (BigInteger): same instant format as expense timestamps
    - No expenses relationship: the ownership core queries by owner_id, never walks the graph
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.db.base import Base, now_millis


class User(Base):
    """Registered account — owner of zero or more expenses."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=now_millis,
    )
