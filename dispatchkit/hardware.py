"""Processor counts and the mapping of queue width requests onto them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dispatchkit.objects import QueueWidth

_CPUINFO = Path("/proc/cpuinfo")


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be at least 1: {value}")


def _physical_cores() -> int | None:
    """Count distinct (package, core) pairs listed in /proc/cpuinfo, if any."""
    try:
        text = _CPUINFO.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    cores: set[tuple[str, str]] = set()
    for block in text.split("\n\n"):
        fields = {}
        for line in block.splitlines():
            key, sep, value = line.partition(":")
            if sep:
                fields[key.strip()] = value.strip()
        if "core id" in fields:
            cores.add((fields.get("physical id", "0"), fields["core id"]))
    return len(cores) or None


@dataclass(frozen=True)
class HardwareConfig:
    """How many processors are active, logical and physical on this host."""

    cc_max_active: int
    cc_max_logical: int
    cc_max_physical: int

    def __post_init__(self) -> None:
        _check_count("cc_max_active", self.cc_max_active)
        _check_count("cc_max_logical", self.cc_max_logical)
        _check_count("cc_max_physical", self.cc_max_physical)

    @classmethod
    def detect(cls) -> HardwareConfig:
        """Read the processor counts of the running machine."""
        logical = os.cpu_count() or 1
        affinity = getattr(os, "sched_getaffinity", None)
        if affinity is not None:
            try:
                active = len(affinity(0)) or logical
            except OSError:
                active = logical
        else:
            active = logical
        active = min(active, logical)
        physical = _physical_cores() or logical
        physical = min(physical, logical)
        return cls(cc_max_active=active, cc_max_logical=logical, cc_max_physical=physical)


def resolve_queue_width(width: int, hw: HardwareConfig | None = None) -> int:
    """Turn a requested queue width into a concrete one.

    Zero is promoted to one, the negative magic values map to processor
    counts and unknown negative values mean the logical processor count.
    """
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"width must be an int, not {type(width).__name__}")
    if width > 0:
        return width
    if width == 0:
        return 1
    if hw is None:
        hw = HardwareConfig.detect()
    if width == QueueWidth.ACTIVE_CPUS:
        return hw.cc_max_active
    if width == QueueWidth.MAX_PHYSICAL_CPUS:
        return hw.cc_max_physical
    return hw.cc_max_logical