"""Response Schemas — frozen Pydantic models, one per JSON endpoint.

Invariants:
    - extra="forbid": no undocumented keys can reach the wire
    - frozen=True: payloads are built once per request and never mutated

Design Decisions:
    - ApiMessage.message maps to the "message" key directly (no alias juggling)
"""

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ApiMessage(_Payload):
    """Body of /api."""
    message: str
    status: str
    timestamp: str
    endpoint: str
    version: str


class HealthStatus(_Payload):
    """Body of /health — timestamp is Unix epoch seconds."""
    status: str
    service: str
    timestamp: int
    uptime: str


class NotFoundBody(_Payload):
    """Body of /404 and, when the catch-all is disabled, of unmatched paths."""
    error: str
    path: str
    message: str
