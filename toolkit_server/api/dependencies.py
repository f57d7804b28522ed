"""Request Dependencies — clocks, start time, and settings injected into handlers.

Invariants:
    - Handlers never read time.* or module globals directly
    - get_start_time reads the value captured by create_app (app.state.started)

Design Decisions:
    - Clocks as dependencies: tests swap them via app.dependency_overrides
"""

import time
from datetime import datetime

from fastapi import Request

from toolkit_server.config import Settings
from toolkit_server.core.uptime import ServerStartTime


def get_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def get_monotonic_ns() -> int:
    return time.monotonic_ns()


def get_start_time(request: Request) -> ServerStartTime:
    return request.app.state.started


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
