"""Core Layer — pure logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or main
    - Functions take the current time as an argument instead of reading a clock

Design Decisions:
    - Functional core separated from imperative shell: handlers read clocks,
      core formats and builds payloads
"""
