"""ORM Models — SQLAlchemy declarative models for users and expenses.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the sole authority for its expenses; every expense is scoped by owner_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all or autogenerate
"""

from expense_tracker.models.user import User  # noqa: F401
from expense_tracker.models.expense import Expense  # noqa: F401
