"""Route Modules — one file per endpoint.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain payload logic (delegate to core.payloads)

Design Decisions:
    - Explicit registration in main.py; the catch-all route is registered last there
"""
