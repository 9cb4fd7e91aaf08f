"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Domain enums from core/ serialize to their raw string values

Design Decisions:
    - Separate from core records: schemas are API contracts, core is domain (ADR: DDD boundary)
"""
