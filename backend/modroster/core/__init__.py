"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic over the immutable catalog

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
