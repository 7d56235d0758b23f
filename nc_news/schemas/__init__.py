"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Schemas never import from core/ logic, core imports them

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
