"""Tests for payload builders — pure, clock passed in."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from toolkit_server.core.payloads import (
    build_api_message,
    build_health_status,
    build_home_text,
    build_not_found,
    format_rfc3339,
)
from toolkit_server.core.uptime import SECOND

NOW = datetime(2024, 12, 1, 9, 5, 7, 123456, tzinfo=timezone.utc)


def test_home_text_is_three_lines():
    lines = build_home_text(NOW).splitlines()
    assert lines == [
        "Hello, World from Go!",
        "Server time: 2024-12-01 09:05:07",
        "Visit /api for JSON response",
    ]


def test_home_text_ends_with_newline():
    assert build_home_text(NOW).endswith("\n")


def test_api_message_fields():
    msg = build_api_message(NOW, "1.0.0")
    assert msg.model_dump() == {
        "message": "Welcome to the Go API!",
        "status": "success",
        "timestamp": "2024-12-01T09:05:07Z",
        "endpoint": "/api",
        "version": "1.0.0",
    }


def test_health_status_fields():
    status = build_health_status(NOW, 90 * SECOND, "go-beginner-toolkit")
    assert status.model_dump() == {
        "status": "healthy",
        "service": "go-beginner-toolkit",
        "timestamp": int(NOW.timestamp()),
        "uptime": "1m30s",
    }


def test_not_found_echoes_path():
    body = build_not_found("/404")
    assert body.model_dump() == {
        "error": "Endpoint not found",
        "path": "/404",
        "message": "Try / or /api endpoints",
    }


def test_payloads_are_frozen():
    body = build_not_found("/404")
    with pytest.raises(ValidationError):
        body.path = "/other"


def test_rfc3339_utc_uses_z_suffix():
    assert format_rfc3339(NOW) == "2024-12-01T09:05:07Z"


def test_rfc3339_keeps_numeric_offset():
    plus_three = timezone(timedelta(hours=3))
    now = datetime(2024, 12, 1, 12, 0, 0, tzinfo=plus_three)
    assert format_rfc3339(now) == "2024-12-01T12:00:00+03:00"


def test_rfc3339_naive_time_gets_local_offset():
    text = format_rfc3339(datetime(2024, 12, 1, 12, 0, 0))
    assert text.startswith("2024-12-01T12:00:00")
    assert text.endswith("Z") or text[-6] in "+-"
