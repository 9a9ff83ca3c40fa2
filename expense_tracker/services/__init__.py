"""Services Layer — expense ownership and account credential orchestration.

Invariants:
    - Services depend on collaborators through core/repository_protocols.py shapes
    - Ownership decisions delegate to the pure rules in core/enforce_ownership.py

Design Decisions:
    - One service per concern: ExpenseOwnershipService (data scope), AuthService (credentials)
"""
