"""Health — liveness check with uptime at "/health".

Invariants:
    - Always 200 if the process is up; no error path
    - uptime is measured from the start time captured by create_app
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from toolkit_server.api.dependencies import (
    get_app_settings, get_monotonic_ns, get_now, get_start_time,
)
from toolkit_server.api.http_methods import ALL_METHODS
from toolkit_server.api.responses import json_response
from toolkit_server.config import Settings
from toolkit_server.core.payloads import build_health_status
from toolkit_server.core.uptime import ServerStartTime

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=ALL_METHODS)
async def health_check(
    now: datetime = Depends(get_now),
    monotonic_ns: int = Depends(get_monotonic_ns),
    started: ServerStartTime = Depends(get_start_time),
    settings: Settings = Depends(get_app_settings),
):
    """Basic liveness check."""
    return json_response(build_health_status(
        now, started.uptime_ns(monotonic_ns), settings.service_name,
    ))
