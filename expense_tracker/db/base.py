"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

import time

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all expense tracker ORM models."""
    pass


def now_millis() -> int:
    """Current UTC instant as epoch milliseconds, the storage format for all timestamps."""
    return time.time_ns() // 1_000_000
