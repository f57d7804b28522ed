"""Uptime — process start time value and Go-style duration formatting.

Invariants:
    - ServerStartTime is frozen: captured once when the app is created, never mutated
    - Uptime is measured on the monotonic clock (wall-clock jumps never make it go backwards)
    - format_uptime(0) == "0s"; output mirrors Go's time.Duration.String()

Design Decisions:
    - Integer nanoseconds end to end: no float rounding in the formatted fraction
    - Start time injected via app.state, not a module global
"""

import time
from dataclasses import dataclass, field
from datetime import datetime

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


@dataclass(frozen=True)
class ServerStartTime:
    """Immutable process start marker."""
    monotonic_ns: int = field(default_factory=time.monotonic_ns)
    wall: datetime = field(default_factory=lambda: datetime.now().astimezone())

    def uptime_ns(self, now_monotonic_ns: int) -> int:
        """Elapsed nanoseconds since start, never negative."""
        return max(0, now_monotonic_ns - self.monotonic_ns)


def format_uptime(elapsed_ns: int) -> str:
    """Render nanoseconds the way Go prints a time.Duration.

    Sub-second values use the largest fitting unit (ns, µs, ms) with a
    trimmed decimal fraction. Longer values use h/m/s components, where
    minutes are shown whenever hours are, e.g. ``1h0m5s``.
    """
    if elapsed_ns == 0:
        return "0s"
    sign = "-" if elapsed_ns < 0 else ""
    elapsed_ns = abs(elapsed_ns)

    if elapsed_ns < SECOND:
        if elapsed_ns < MICROSECOND:
            return f"{sign}{elapsed_ns}ns"
        if elapsed_ns < MILLISECOND:
            return f"{sign}{_with_fraction(elapsed_ns, MICROSECOND)}µs"
        return f"{sign}{_with_fraction(elapsed_ns, MILLISECOND)}ms"

    hours, rest = divmod(elapsed_ns, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    parts = [sign]
    if hours:
        parts.append(f"{hours}h")
    if hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{_with_fraction(rest, SECOND)}s")
    return "".join(parts)


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")
