"""Pydantic Schemas: request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (types only)
    - Presence rules (required fields) are enforced by check_required, so the
      failure message is the resource's own, not a generic type error

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
