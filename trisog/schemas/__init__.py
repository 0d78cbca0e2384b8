"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Upsert schemas validate at the system boundary (strip strings, lax types)
    - Response schemas read ORM objects via from_attributes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
