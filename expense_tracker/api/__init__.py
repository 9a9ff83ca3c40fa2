"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Identity enters the application only through api/dependencies.get_current_principal

Design Decisions:
    - Thin routes delegate to services; core Failure values become HTTP errors here
"""
