"""Infrastructure Layer — persistence adapters, credentials and cross-cutting concerns.

Invariants:
    - Implements the protocols declared in core/repository_protocols.py
    - All SQLAlchemy errors mapped to DatabaseError by the session manager

Design Decisions:
    - Adapters take the request-scoped AsyncSession: one unit of work per HTTP request
"""
