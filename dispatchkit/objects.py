"""Object type tags, continuation flags, queue width codes and size rounding."""

from __future__ import annotations

import enum

API_VERSION = 20090501

CACHELINE_SIZE = 64
VECTOR_SIZE = 16

META_CONTINUATION = 0x00000
META_QUEUE = 0x10000
META_SOURCE = 0x20000
META_SEMAPHORE = 0x30000
ATTR_TYPE_FLAG = 0x10000000

_META_MASK = 0x0FFF0000

OBJECT_GLOBAL_REFCNT = 0xFFFFFFFF
OBJECT_SUSPEND_LOCK = 1
OBJECT_SUSPEND_INTERVAL = 2

QUEUE_MIN_LABEL_SIZE = 64
QUEUE_PRIORITY_COUNT = 3
QUEUE_OVERCOMMIT = 0x2
QUEUE_FLAGS_MASK = QUEUE_OVERCOMMIT


class ObjectType(enum.IntEnum):
    """Type tag carried by every dispatch object."""

    CONTINUATION = META_CONTINUATION
    QUEUE_ATTR = META_QUEUE | ATTR_TYPE_FLAG
    QUEUE = 1 | META_QUEUE
    QUEUE_GLOBAL = 2 | META_QUEUE
    QUEUE_MGR = 3 | META_QUEUE
    SEMAPHORE = META_SEMAPHORE
    SOURCE_ATTR = META_SOURCE | ATTR_TYPE_FLAG
    SOURCE_KEVENT = 1 | META_SOURCE

    def meta(self) -> int:
        """Return the meta-type (continuation, queue, source or semaphore)."""
        return self.value & _META_MASK

    def is_attribute(self) -> bool:
        """Whether this tag names an attribute structure."""
        return bool(self.value & ATTR_TYPE_FLAG)


class ContinuationFlag(enum.IntFlag):
    """Bits stored in a continuation to describe how it was submitted."""

    ASYNC = 0x1
    BARRIER = 0x2
    GROUP = 0x4


class QueueWidth(enum.IntEnum):
    """Negative magic values that ask for an automatically sized queue width."""

    ACTIVE_CPUS = -1
    MAX_PHYSICAL_CPUS = -2
    MAX_LOGICAL_CPUS = -3


def _round_up(size: int, granule: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, not {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return (size + granule - 1) & ~(granule - 1)


def round_up_to_cacheline(size: int) -> int:
    """Round ``size`` up to a whole number of cache lines."""
    return _round_up(size, CACHELINE_SIZE)


def round_up_to_vector_size(size: int) -> int:
    """Round ``size`` up to a multiple of the vector register size."""
    return _round_up(size, VECTOR_SIZE)