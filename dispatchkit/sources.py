"""Private event-source flags and the timer state kept by a timer source."""

from __future__ import annotations

import enum
from dataclasses import dataclass

SOURCE_CANCELED = 0x1

_UINT64_MAX = (1 << 64) - 1


class VfsFlag(enum.IntFlag):
    """File-system events reported by a VFS source."""

    NOTRESP = 0x0001
    NEEDAUTH = 0x0002
    LOWDISK = 0x0004
    MOUNT = 0x0008
    UNMOUNT = 0x0010
    DEAD = 0x0020
    ASSIST = 0x0040
    NOTRESPLOCK = 0x0080
    UPDATE = 0x0100
    VERYLOWDISK = 0x0200


class ProcFlag(enum.IntFlag):
    """Extra process event: the child has been reaped by its parent."""

    REAP = 0x10000000


class MachSendFlag(enum.IntFlag):
    """Send-right event: the matching receive right was destroyed."""

    DELETED = 0x2


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"{name} must fit in an unsigned 64-bit value: {value}")


@dataclass
class TimerSource:
    """Timer schedule: first fire at ``start``, then every ``interval`` ns.

    An interval of zero makes a one-shot timer. ``leeway`` is the slack the
    timer may be fired late by and ``flags`` holds the timer kind.
    """

    start: int
    interval: int = 0
    leeway: int = 0
    flags: int = 0
    target: int = 0

    def __post_init__(self) -> None:
        for name in ("start", "interval", "leeway", "flags", "target"):
            _check_u64(name, getattr(self, name))
        if not self.target:
            self.target = self.start

    def next_fire(self, now: int) -> int | None:
        """Return the first scheduled fire time at or after ``now``.

        A one-shot timer whose time has passed returns None.
        """
        _check_u64("now", now)
        if now <= self.start:
            return self.start
        if self.interval == 0:
            return None
        periods = -(-(now - self.start) // self.interval)
        fire = self.start + periods * self.interval
        if fire > _UINT64_MAX:
            return None
        return fire