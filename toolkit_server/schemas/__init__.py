"""Pydantic Schemas — response contracts for the JSON endpoints.

Invariants:
    - Each model's field set is exactly the documented key set of its endpoint
    - Field declaration order is the serialized key order

Design Decisions:
    - Separate from core builders: schemas are API contracts, core decides values
"""
