"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Request schemas coerce, they never reject: missing fields become None
    - Response schemas serialize record ids under the public "_id" key

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
