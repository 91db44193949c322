"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas validate at the system boundary (bodies in, rows out)
    - One Create, one Update and one Read shape per entity

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
