"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Malformed input is rejected here; the ownership core assumes well-typed values

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
