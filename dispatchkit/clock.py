"""Dispatch time values: a monotonic clock, a wall clock and timeouts.

A dispatch time is an unsigned 64-bit number. Zero means "now" and
``TIME_FOREVER`` means "never". Other values are absolute-clock ticks when
they read as a non-negative signed 64-bit number. They are negated wall-clock
nanoseconds when they read as a negative one.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass

NSEC_PER_SEC = 1_000_000_000
USEC_PER_SEC = 1_000_000
NSEC_PER_USEC = 1_000

TIME_NOW = 0
TIME_FOREVER = (1 << 64) - 1

_UINT64_MASK = (1 << 64) - 1
_INT64_MAX = (1 << 63) - 1
_INT64_MIN = -(1 << 63)
_WALL_UNDERFLOW = TIME_FOREVER - 1


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _check_u64(name: str, value: object) -> int:
    value = _check_int(name, value)
    if not 0 <= value <= _UINT64_MASK:
        raise ValueError(f"{name} must fit in an unsigned 64-bit value: {value}")
    return value


def _check_i64(name: str, value: object) -> int:
    value = _check_int(name, value)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{name} must fit in a signed 64-bit value: {value}")
    return value


def _signed(value: int) -> int:
    """Read an unsigned 64-bit pattern as a signed 64-bit number."""
    value &= _UINT64_MASK
    return value - (1 << 64) if value > _INT64_MAX else value


def _unsigned(value: int) -> int:
    return value & _UINT64_MASK


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True)
class Timebase:
    """Ratio between absolute-clock ticks and nanoseconds (ns = ticks * numer / denom)."""

    numer: int = 1
    denom: int = 1

    def __post_init__(self) -> None:
        for name in ("numer", "denom"):
            value = _check_int(name, getattr(self, name))
            if value < 1 or value > 0xFFFFFFFF:
                raise ValueError(f"{name} must be between 1 and 2**32 - 1: {value}")

    def to_nanoseconds(self, ticks: int) -> int:
        """Convert unsigned clock ticks to nanoseconds, wrapping at 64 bits."""
        ticks = _check_u64("ticks", ticks)
        if self.numer == self.denom:
            return ticks
        return _unsigned(ticks * self.numer // self.denom)

    def from_nanoseconds(self, nsec: int) -> int:
        """Convert signed nanoseconds to clock ticks, saturating at the int64 limits."""
        nsec = _check_i64("nsec", nsec)
        if self.numer == self.denom:
            return nsec
        ticks = _div_trunc(nsec * self.denom, self.numer)
        return max(_INT64_MIN, min(_INT64_MAX, ticks))


_TIMEBASE = Timebase()


def wall_nanoseconds() -> int:
    """Return the wall-clock time in nanoseconds at microsecond resolution."""
    return time.time_ns() // NSEC_PER_USEC * NSEC_PER_USEC


def absolute_time() -> int:
    """Return the current reading of the monotonic absolute clock, in ticks."""
    return time.monotonic_ns()


def dispatch_time(when: int, delta: int) -> int:
    """Return ``when`` moved by ``delta`` nanoseconds.

    A ``when`` of zero starts from the current absolute time. Wall-clock
    values stay on the wall clock. A result that would overflow becomes
    ``TIME_FOREVER``.
    """
    when = _check_u64("when", when)
    delta = _check_i64("delta", delta)
    if when == TIME_FOREVER:
        return TIME_FOREVER
    if _signed(when) < 0:
        moved = _unsigned(when - delta)
        if delta >= 0:
            return TIME_FOREVER if _signed(moved) >= 0 else moved
        # -1 would read as TIME_FOREVER, so underflow stops just before it.
        return _WALL_UNDERFLOW if _signed(moved) >= -1 else moved
    delta = _TIMEBASE.from_nanoseconds(delta)
    if when == TIME_NOW:
        when = absolute_time()
    moved = _unsigned(when + delta)
    if delta >= 0:
        return TIME_FOREVER if _signed(moved) <= 0 else moved
    return 1 if _signed(moved) < 1 else moved


def walltime(when: Sequence[int] | None, delta: int) -> int:
    """Return a wall-clock dispatch time ``delta`` nanoseconds after ``when``.

    ``when`` is a ``(seconds, nanoseconds)`` pair, or None for the current
    wall-clock time.
    """
    delta = _check_i64("delta", delta)
    if when is None:
        nsec = wall_nanoseconds()
    else:
        try:
            seconds, nanoseconds = when
        except (TypeError, ValueError):
            raise TypeError("when must be None or a (seconds, nanoseconds) pair") from None
        seconds = _check_int("seconds", seconds)
        nanoseconds = _check_int("nanoseconds", nanoseconds)
        nsec = _signed(seconds * NSEC_PER_SEC + nanoseconds)
    nsec = _signed(nsec + delta)
    if nsec <= 1:
        return TIME_FOREVER if delta >= 0 else _WALL_UNDERFLOW
    return _unsigned(-nsec)


def timeout(when: int) -> int:
    """Return the nanoseconds left until ``when``, or zero once it has passed."""
    when = _check_u64("when", when)
    if when == TIME_FOREVER:
        return TIME_FOREVER
    if when == TIME_NOW:
        return 0
    if _signed(when) < 0:
        deadline = -_signed(when)
        now = wall_nanoseconds()
        return 0 if now >= deadline else deadline - now
    now = absolute_time()
    return 0 if now >= when else _TIMEBASE.to_nanoseconds(when - now)