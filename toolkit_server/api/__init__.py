"""API Layer — FastAPI routes, response rendering, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every route accepts every HTTP method identically

Design Decisions:
    - Thin routes delegate payload construction to core.payloads
"""
