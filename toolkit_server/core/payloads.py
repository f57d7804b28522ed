"""Payload Builders — literal response bodies for every route.

Invariants:
    - Pure: current time and elapsed uptime are passed in, never read here
    - Home text is exactly three newline-terminated lines
    - Timestamps: home uses "YYYY-MM-DD HH:MM:SS", /api uses RFC 3339 with offset

Design Decisions:
    - Literal strings kept here, next to the builders that emit them
"""

from datetime import datetime

from toolkit_server.core.uptime import format_uptime
from toolkit_server.schemas.responses import ApiMessage, HealthStatus, NotFoundBody

GREETING = "Hello, World from Go!"
API_HINT = "Visit /api for JSON response"
API_WELCOME = "Welcome to the Go API!"
API_ENDPOINT = "/api"
NOT_FOUND_ERROR = "Endpoint not found"
NOT_FOUND_HINT = "Try / or /api endpoints"

HOME_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_home_text(now: datetime) -> str:
    return (
        f"{GREETING}\n"
        f"Server time: {now.strftime(HOME_TIME_FORMAT)}\n"
        f"{API_HINT}\n"
    )


def build_api_message(now: datetime, version: str) -> ApiMessage:
    return ApiMessage(
        message=API_WELCOME,
        status="success",
        timestamp=format_rfc3339(now),
        endpoint=API_ENDPOINT,
        version=version,
    )


def build_health_status(
    now: datetime, uptime_ns: int, service: str,
) -> HealthStatus:
    return HealthStatus(
        status="healthy",
        service=service,
        timestamp=int(now.timestamp()),
        uptime=format_uptime(uptime_ns),
    )


def build_not_found(path: str) -> NotFoundBody:
    return NotFoundBody(
        error=NOT_FOUND_ERROR, path=path, message=NOT_FOUND_HINT,
    )


def format_rfc3339(now: datetime) -> str:
    """Second-precision RFC 3339; naive datetimes are taken as local time."""
    if now.tzinfo is None:
        now = now.astimezone()
    text = now.isoformat(timespec="seconds")
    # UTC offset renders as Z
    return text[:-6] + "Z" if text.endswith("+00:00") else text
