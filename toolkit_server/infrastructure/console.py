"""Console Banners — human-facing startup text printed to stdout.

Invariants:
    - Banners are cosmetic: they never raise into serving or request handling
    - schedule_server_info is fire-and-forget (no handle awaited, no result)

Design Decisions:
    - print over logging: banners are console UI, not log records
    - loop.call_later over a thread: runs on the server's own event loop
"""

import asyncio
import logging

logger = logging.getLogger(__name__)

RULE = "=" * 29
WIDE_RULE = "=" * 42

ENDPOINTS = (
    ("GET /", "Welcome message"),
    ("GET /api", "JSON API response"),
    ("GET /health", "Health check"),
)


def print_startup_banner() -> None:
    print("🚀 Go Beginner Toolkit Server")
    print(RULE)
    print("Project: Moringa AI Capstone")
    print("Technology: Python (FastAPI)")
    print("Author: [Your Name]")
    print(RULE)


def print_listening(port: int) -> None:
    print(f"⏳ Starting server on http://localhost:{port}")
    print("🔄 Initializing...")


def print_server_info(port: int) -> None:
    print("\n📢 Server Information:")
    print(f"   Port: {port}")
    print("   Endpoints:")
    for route, description in ENDPOINTS:
        print(f"     • {route:<14}- {description}")
    print("   Press Ctrl+C to stop the server")
    print(WIDE_RULE)


def schedule_server_info(
    port: int, delay_seconds: float,
) -> asyncio.TimerHandle:
    """Print the server information banner once, after a short delay."""
    loop = asyncio.get_running_loop()
    return loop.call_later(delay_seconds, _print_server_info_safely, port)


def _print_server_info_safely(port: int) -> None:
    try:
        print_server_info(port)
    except OSError as exc:
        logger.warning(f"Could not print server information: {exc}")
