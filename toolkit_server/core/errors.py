"""Error Hierarchy — typed, categorized exceptions for server failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - public_message is what clients see; message may carry internal detail for logs
    - No internal details leaked in client-facing bodies

Design Decisions:
    - Single hierarchy with ToolkitError base: one global handler catches all
    - Client-facing error bodies are plain text, matching the server's text/plain error path
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    SERIALIZATION = "serialization"
    STARTUP = "startup"
    TIMEOUT = "timeout"


class ToolkitError(Exception):
    """Base exception for all server errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.public_message = public_message or message

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ResponseEncodingError(ToolkitError):
    """A response payload could not be serialized to JSON."""
    def __init__(self, reason: str):
        super().__init__(
            f"Error encoding JSON: {reason}",
            "RESPONSE_ENCODING_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.CRITICAL, 500,
            public_message="Failed to encode JSON response",
        )
        self.reason = reason


class ServerStartupError(ToolkitError):
    """The listening socket could not be bound."""
    def __init__(self, host: str, port: int, reason: str):
        super().__init__(
            f"Failed to start server on {host}:{port}: {reason}",
            "BIND_FAILED", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, 500,
        )
        self.host = host
        self.port = port


# ─── Transport Errors ───────────────────────────────────────────

class RequestTimeoutError(ToolkitError):
    """A request exceeded its read or write deadline.

    Read overruns are the client's fault (408); write overruns mean the
    handler was too slow to answer (503).
    """
    def __init__(self, phase: str, timeout_seconds: float):
        http_status = 408 if phase == "read" else 503
        super().__init__(
            f"Request {phase} exceeded {timeout_seconds:g}s deadline",
            f"REQUEST_{phase.upper()}_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.WARNING, http_status,
            public_message="Request Timeout" if phase == "read" else "Service Unavailable",
        )
        self.phase = phase
        self.timeout_seconds = timeout_seconds
