"""Infrastructure Layer — process-level concerns: logging, console output, serving.

Invariants:
    - Infrastructure never builds response payloads
    - Only this layer touches sockets, stdout, and the uvicorn server

Design Decisions:
    - Thin wrappers over stdlib logging and uvicorn, configured from Settings
"""
